"""
Rule sets for name tape rendering.

Each culture is described by an ordered tuple of `Rule` values. A rule has a
human-readable name taken from the name tape guidelines, a validation
predicate and, optionally, a transform. Transforms are pure: they take a
`ParsedName` and return a `RuleOutcome` that either carries a refined name or
the finished label.

Rules without a transform document a guideline that is not enforced.

## Chinese/English
1. Spell in full if the name fits the budget (ends the pipeline).
2. Abbreviate every given name to its initial.
3. If still too long, keep the surname plus the first two initials, or the
   first initial only.

## Malay
1. Drop the father's name (the marked surname tokens).
2. Replace Mohammed/Abdul transliterations with MD/AD.
3. Keep the first given name and any MD/AD tokens.

## Indian
Same as Malay without the MD/AD step.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from nametape.services.formatting import NameFormattingService
from nametape.types import CultureType, NameTapeConfig, ParsedName, RuleOutcome


def _always_valid(parsed_name: ParsedName) -> bool:
    return True


@dataclass(frozen=True)
class Rule:
    """One named step of a culture's rule set."""

    name: str
    validate: Callable[[ParsedName], bool] = _always_valid
    transform: Callable[[ParsedName], RuleOutcome] | None = None

    @property
    def has_transform(self) -> bool:
        return self.transform is not None


# ════════════════════════════════════════════════════════════════════════════════
# DOCUMENTATION-ONLY RULES
# ════════════════════════════════════════════════════════════════════════════════

SURNAME_PRINTED_IN_FULL = Rule(name="Surname is to be printed in full")

MDES_RANK_AND_GRADE = Rule(
    name="Rank and grade to be reflected for servicepersons in Military Domain Expert Scheme (MDES).",
)

DOCTOR_TITLE = Rule(name="Doctor title (DR) to be reflected for Medical Officers.")

ALPHABET_ONLY = Rule(name="Should only include letters from A to Z")

# Prefix guidelines shared by every culture; the formatter applies them
GENERAL_RULES = (MDES_RANK_AND_GRADE, DOCTOR_TITLE)


# ════════════════════════════════════════════════════════════════════════════════
# TRANSFORMING RULES
# ════════════════════════════════════════════════════════════════════════════════


def spell_in_full_if_possible(config: NameTapeConfig, formatter: NameFormattingService) -> Rule:
    def transform(value: ParsedName) -> RuleOutcome:
        spelt_in_full = formatter.render_in_full(value)
        if len(spelt_in_full) <= config.character_limit:
            return RuleOutcome.final(spelt_in_full)
        return RuleOutcome.proceed(value)

    return Rule(
        name=(
            f"Name spelt in full in accordance to NRIC if it is within {config.character_limit} characters "
            "including MDES ranks or Doctor title, if applicable."
        ),
        transform=transform,
    )


def exclude_fathers_name() -> Rule:
    def transform(value: ParsedName) -> RuleOutcome:
        tokens = [token for index, token in enumerate(value.tokens) if not value.is_surname(index)]
        return RuleOutcome.proceed(value.with_tokens(tokens).with_surname_indices(()))

    return Rule(name="Exclude father's name", transform=transform)


def abbreviate_md_and_ad(config: NameTapeConfig) -> Rule:
    def abbreviate(token: str) -> str:
        if config.md_pattern.match(token):
            return "MD"
        if config.ad_pattern.match(token):
            return "AD"
        return token

    def transform(value: ParsedName) -> RuleOutcome:
        return RuleOutcome.proceed(value.with_tokens(abbreviate(token) for token in value.tokens))

    return Rule(
        name="MD and AD can used as abbreviation for Mohammed/Mohamad and Abdul respectively.",
        transform=transform,
    )


def only_first_given_name(config: NameTapeConfig) -> Rule:
    def is_abbreviation(token: str) -> bool:
        return token.upper() in config.abbreviation_tokens

    def transform(value: ParsedName) -> RuleOutcome:
        first_given_name_index = next(
            (
                index
                for index, token in enumerate(value.tokens)
                if not value.is_surname(index) and not is_abbreviation(token)
            ),
            -1,
        )
        tokens = [
            token
            for index, token in enumerate(value.tokens)
            if value.is_surname(index) or index == first_given_name_index or is_abbreviation(token)
        ]
        return RuleOutcome.proceed(value.with_tokens(tokens).with_surname_indices(()))

    return Rule(name="Only first given name will be spelt in full.", transform=transform)


def abbreviate_given_names() -> Rule:
    def transform(value: ParsedName) -> RuleOutcome:
        tokens = [token if value.is_surname(index) else token[:1] for index, token in enumerate(value.tokens)]
        return RuleOutcome.proceed(value.with_tokens(tokens))

    return Rule(
        name="Given names to be abbreviated to initials before or after surname based on NRIC sequence.",
        transform=transform,
    )


def truncate_abbreviated_names(config: NameTapeConfig, formatter: NameFormattingService) -> Rule:
    def keep_through(value: ParsedName, last_given_index: int) -> ParsedName:
        # Surname tokens always survive, wherever they sit
        return value.with_tokens(
            token
            for index, token in enumerate(value.tokens)
            if value.is_surname(index) or index <= last_given_index
        )

    def transform(value: ParsedName) -> RuleOutcome:
        if formatter.fits(value):
            return RuleOutcome.proceed(value)

        first_given_name_index = next(
            (index for index in range(len(value.tokens)) if not value.is_surname(index)),
            -1,
        )

        with_two_given_names = keep_through(value, first_given_name_index + 1)
        if formatter.fits(with_two_given_names):
            return RuleOutcome.proceed(with_two_given_names)

        return RuleOutcome.proceed(keep_through(value, first_given_name_index))

    return Rule(
        name=(
            f"If abbreviated given names exceeds {config.character_limit} characters, "
            "only first and/or second given names will be abbreviated to initials."
        ),
        transform=transform,
    )


# ════════════════════════════════════════════════════════════════════════════════
# RULE SETS BY CULTURE
# ════════════════════════════════════════════════════════════════════════════════


def build_rule_sets(
    config: NameTapeConfig,
    formatter: NameFormattingService,
) -> Mapping[CultureType, tuple[Rule, ...]]:
    """Build the immutable culture -> ordered rules table for one configuration."""
    first_given_name = only_first_given_name(config)
    fathers_name = exclude_fathers_name()

    return MappingProxyType(
        {
            CultureType.CHINESE_ENGLISH: (
                spell_in_full_if_possible(config, formatter),
                abbreviate_given_names(),
                truncate_abbreviated_names(config, formatter),
                ALPHABET_ONLY,
                SURNAME_PRINTED_IN_FULL,
            ),
            CultureType.MALAY: (
                fathers_name,
                abbreviate_md_and_ad(config),
                first_given_name,
                ALPHABET_ONLY,
            ),
            CultureType.INDIAN: (
                fathers_name,
                first_given_name,
                ALPHABET_ONLY,
            ),
        },
    )
