"""
Name formatting service for name tape rendering.

Renders a parsed name with its title or rank prefix and measures the result
against the character budget.
"""
from __future__ import annotations

from nametape.types import NameTapeConfig, ParsedName


class NameFormattingService:
    """Service for rendering parsed names into label strings."""

    def __init__(self, config: NameTapeConfig):
        self._config = config

    @property
    def character_limit(self) -> int:
        return self._config.character_limit

    def prefix(self, parsed_name: ParsedName) -> str:
        """Doctor title wins over the MDES rank; everyone else gets no prefix."""
        if parsed_name.is_doctor:
            return self._config.doctor_prefix
        if parsed_name.is_mdes:
            return parsed_name.rank or ""
        return ""

    def render_in_full(self, parsed_name: ParsedName) -> str:
        parts = [self.prefix(parsed_name), *parsed_name.tokens]
        return " ".join(part for part in parts if part)

    def fits(self, parsed_name: ParsedName) -> bool:
        return len(self.render_in_full(parsed_name)) <= self._config.character_limit

    def budget_ratio(self, label: str) -> float:
        """Fraction of the character budget used by a rendered label."""
        return len(label) / self._config.character_limit
