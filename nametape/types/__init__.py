"""
Types package for name tape rendering.

This package contains the name records, result types and configuration
used throughout the rendering pipeline.
"""

from nametape.types.config import CHARACTER_LIMIT, NameTapeConfig
from nametape.types.names import CultureType, NameInput, ParsedName
from nametape.types.results import RuleOutcome

__all__ = [
    "CHARACTER_LIMIT",
    "CultureType",
    "NameInput",
    "NameTapeConfig",
    "ParsedName",
    "RuleOutcome",
]
