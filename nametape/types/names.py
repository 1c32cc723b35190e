"""
Name record types.

`NameInput` is the raw record handed over by a form or a caller, and
`ParsedName` is the tokenised value that flows through the rule pipeline.
Both are frozen: rules produce new values rather than editing them.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum


class CultureType(Enum):
    """Naming convention that selects the rule set."""

    CHINESE_ENGLISH = "chineseEnglish"
    MALAY = "malay"
    INDIAN = "indian"

    @property
    def label(self) -> str:
        return _CULTURE_LABELS[self]

    @classmethod
    def from_tag(cls, tag: CultureType | str) -> CultureType:
        """Resolve a member, its tag ("chineseEnglish") or its name ("CHINESE_ENGLISH")."""
        if isinstance(tag, cls):
            return tag
        for member in cls:
            if tag in (member.value, member.name):
                return member
        raise ValueError(f"unknown culture type: {tag!r}")


_CULTURE_LABELS = {
    CultureType.CHINESE_ENGLISH: "Chinese/English",
    CultureType.MALAY: "Malay",
    CultureType.INDIAN: "Indian",
}


@dataclass(frozen=True)
class NameInput:
    """Raw name record as entered, before tokenisation."""

    name: str
    culture: CultureType
    surname_indices: tuple[int, ...] = ()
    rank: str | None = ""
    is_mdes: bool = False
    is_doctor: bool = False

    @classmethod
    def from_dict(cls, data: Mapping) -> NameInput:
        """Build from the camelCase record used by the form layer."""
        return cls(
            name=data.get("name", ""),
            culture=CultureType.from_tag(data["type"]),
            surname_indices=tuple(data.get("surnameIndices") or ()),
            rank=data.get("rank", ""),
            is_mdes=bool(data.get("isMdes", False)),
            is_doctor=bool(data.get("isDoctor", False)),
        )


@dataclass(frozen=True)
class ParsedName:
    """Tokenised name plus the metadata the rules need."""

    tokens: tuple[str, ...]
    culture: CultureType
    surname_indices: tuple[int, ...]
    rank: str | None
    is_mdes: bool
    is_doctor: bool

    def is_surname(self, index: int) -> bool:
        return index in self.surname_indices

    def with_tokens(self, tokens) -> ParsedName:
        return replace(self, tokens=tuple(tokens))

    def with_surname_indices(self, surname_indices) -> ParsedName:
        return replace(self, surname_indices=tuple(surname_indices))
