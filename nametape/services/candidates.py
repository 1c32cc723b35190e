"""
Candidate generation service.

When a Chinese/English surname sits between given names (Alex Tan Jun Xiong),
the name can legitimately be read from the front (Alex Tan) or from the back
(Tan Jun Xiong). Each reading is rendered separately and the distinct labels
are returned in the order the readings were produced.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

from nametape.services.pipeline import RulePipelineService
from nametape.services.rules import Rule
from nametape.types import CultureType, ParsedName

logger = logging.getLogger("nametape")


class CandidateGenerationService:
    """Service producing the distinct candidate labels for one parsed name."""

    def __init__(self, rule_sets: Mapping[CultureType, tuple[Rule, ...]], pipeline: RulePipelineService):
        self._rule_sets = rule_sets
        self._pipeline = pipeline

    def parsed_name_candidates(self, parsed_name: ParsedName) -> list[ParsedName]:
        """Return the full name plus front-only and back-only readings where they apply."""
        if parsed_name.culture is not CultureType.CHINESE_ENGLISH:
            return [parsed_name]

        if not parsed_name.surname_indices:
            return [parsed_name]

        first_surname_index = min(parsed_name.surname_indices)
        last_surname_index = max(parsed_name.surname_indices)

        has_names_on_both_sides = first_surname_index > 0 and last_surname_index < len(parsed_name.tokens) - 1
        if not has_names_on_both_sides:
            return [parsed_name]

        front_names_only = parsed_name.with_tokens(parsed_name.tokens[: last_surname_index + 1])
        back_names_only = parsed_name.with_tokens(parsed_name.tokens[first_surname_index:]).with_surname_indices(
            index - first_surname_index for index in parsed_name.surname_indices
        )

        return [parsed_name, front_names_only, back_names_only]

    def generate_candidate_names(self, parsed_name: ParsedName) -> list[str]:
        """Run every candidate through the culture's rules and drop repeated labels."""
        rules = self._rule_sets[parsed_name.culture]
        candidates = self.parsed_name_candidates(parsed_name)

        labels = [self._pipeline.apply_rules(rules, candidate) for candidate in candidates]
        distinct = list(dict.fromkeys(labels))

        logger.debug(
            "%s: %d reading(s), %d distinct label(s): %s",
            parsed_name.culture.label,
            len(candidates),
            len(distinct),
            distinct,
        )
        return distinct
