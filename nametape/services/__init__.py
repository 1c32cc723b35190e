"""
Services package for name tape rendering.

This package contains all service classes used by the name tape
generator, organized by pipeline stage.
"""

from nametape.services.candidates import CandidateGenerationService
from nametape.services.formatting import NameFormattingService
from nametape.services.parsing import NameParsingService
from nametape.services.pipeline import RulePipelineService
from nametape.services.rules import GENERAL_RULES, Rule, build_rule_sets
from nametape.types import CHARACTER_LIMIT, CultureType, NameInput, NameTapeConfig, ParsedName, RuleOutcome

__all__ = [
    # Types (re-exported for compatibility)
    "CHARACTER_LIMIT",
    "CultureType",
    "NameInput",
    "NameTapeConfig",
    "ParsedName",
    "RuleOutcome",
    # Rules
    "GENERAL_RULES",
    "Rule",
    "build_rule_sets",
    # Services
    "CandidateGenerationService",
    "NameFormattingService",
    "NameParsingService",
    "RulePipelineService",
]
