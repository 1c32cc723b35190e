"""
Configuration for name tape rendering.

Holds the character budget and the precompiled patterns used by the
culture rule sets. Instances are immutable and safe to share.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace

CHARACTER_LIMIT = 17

# Transliterations of Mohammed/Mohamad: Mohamed, Muhammad, Mohammad, Mahamat, ...
_MD_PATTERN = r"^m[aeou][hx][ae]mm?[ae][dt]$"
# Transliterations of Abdul: Abdul, Abdol, Abdool, Abdoul, Abdeool, ...
_AD_PATTERN = r"^abd(?:[aeiou]|[aeio]?oo|ou)l$"


@dataclass(frozen=True)
class NameTapeConfig:
    """Immutable configuration - Scala case class style."""

    # Maximum label length, prefix included
    character_limit: int

    # Prefix printed for medical officers
    doctor_prefix: str

    # Token separator for full names
    whitespace_pattern: re.Pattern[str]

    # Precompiled whole-token patterns for the Malay MD/AD abbreviations
    md_pattern: re.Pattern[str]
    ad_pattern: re.Pattern[str]

    # Abbreviations that are never treated as the first given name
    abbreviation_tokens: tuple[str, ...]

    @classmethod
    def create_default(cls) -> NameTapeConfig:
        """Factory method to create default configuration - Scala apply() equivalent."""
        return cls(
            character_limit=CHARACTER_LIMIT,
            doctor_prefix="DR",
            whitespace_pattern=re.compile(r"\s+"),
            md_pattern=re.compile(_MD_PATTERN, re.IGNORECASE),
            ad_pattern=re.compile(_AD_PATTERN, re.IGNORECASE),
            abbreviation_tokens=("MD", "AD"),
        )

    def with_character_limit(self, character_limit: int) -> NameTapeConfig:
        """Immutable update method - Scala copy() equivalent."""
        if character_limit < 1:
            raise ValueError("character_limit must be >= 1")
        return replace(self, character_limit=character_limit)
