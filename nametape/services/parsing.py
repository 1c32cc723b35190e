"""
Name parsing service.

Turns a raw `NameInput` into the `ParsedName` the rule pipeline works on.
"""
from __future__ import annotations

from nametape.types import NameInput, NameTapeConfig, ParsedName


class NameParsingService:
    """Service for tokenising raw name records."""

    def __init__(self, config: NameTapeConfig):
        self._config = config

    def parse(self, name_input: NameInput) -> ParsedName:
        """
        Split the full name on whitespace and copy the remaining fields.

        Nothing is validated here: surname indices outside the token range
        are kept as given and simply never match a token downstream.
        """
        return ParsedName(
            tokens=tuple(token for token in self._config.whitespace_pattern.split(name_input.name) if token),
            culture=name_input.culture,
            surname_indices=tuple(name_input.surname_indices),
            rank=name_input.rank,
            is_mdes=name_input.is_mdes,
            is_doctor=name_input.is_doctor,
        )
