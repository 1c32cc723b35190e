"""
Rule pipeline service.

Runs a culture's rules in order against one parsed name and produces the
upper-cased label.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from nametape.services.formatting import NameFormattingService
from nametape.services.rules import Rule
from nametape.types import ParsedName

logger = logging.getLogger("nametape")


class RulePipelineService:
    """Service applying an ordered rule set to a parsed name."""

    def __init__(self, formatter: NameFormattingService):
        self._formatter = formatter

    def apply_rules(self, rules: Iterable[Rule], parsed_name: ParsedName) -> str:
        """
        Apply rules strictly in order.

        A final outcome ends the pipeline immediately. Otherwise the refined
        name replaces the current one, and once the rules are exhausted the
        current name is rendered in full.
        """
        name = parsed_name

        for rule in rules:
            if not rule.validate(name):
                # Guidelines are advisory; a failing check never blocks the label
                logger.debug("rule not satisfied: %s (%s)", rule.name, " ".join(name.tokens))

            if not rule.has_transform:
                continue

            outcome = rule.transform(name)
            if outcome.is_final:
                logger.debug("rule ended pipeline: %s", rule.name)
                return outcome.label.upper()

            name = outcome.parsed_name

        return self._formatter.render_in_full(name).upper()
