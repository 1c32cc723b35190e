"""
Result types for the rule pipeline.

A rule either refines the parsed name and lets the pipeline continue, or
produces the finished label and ends it. `RuleOutcome` carries exactly one
of the two.
"""
from __future__ import annotations

from dataclasses import dataclass

from nametape.types.names import ParsedName


@dataclass(frozen=True)
class RuleOutcome:
    """Result of applying one rule - Scala Either-like structure."""

    parsed_name: ParsedName | None
    label: str | None = None

    @classmethod
    def proceed(cls, parsed_name: ParsedName) -> RuleOutcome:
        return cls(parsed_name=parsed_name, label=None)

    @classmethod
    def final(cls, label: str) -> RuleOutcome:
        return cls(parsed_name=None, label=label)

    @property
    def is_final(self) -> bool:
        return self.label is not None
