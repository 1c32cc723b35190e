"""
Name Tape Generation Module

This module renders a person's NRIC name into a name tape label of at most 17
characters, following the convention of one of three name cultures.

## Overview

The core functionality is provided by the `NameTapeGenerator` class, which uses a
multi-stage pipeline to process names:

1. **Parsing**: Splits the full name into tokens, keeping the marked surname positions
2. **Candidate Generation**: Produces front and back readings for interior surnames
3. **Rule Pipeline**: Applies the culture's ordered rules to every reading
4. **Rendering**: Prefixes DR or the MDES rank and upper-cases the label
5. **De-duplication**: Keeps distinct labels in the order they were produced

## Architecture

### Clean Service Separation
- **NameParsingService**: Raw record to tokenised `ParsedName`
- **NameFormattingService**: Prefix selection, rendering and budget checks
- **RulePipelineService**: Ordered rule execution with early exit
- **CandidateGenerationService**: Alternative readings and label de-duplication
- **NameTapeGenerator**: Main entry point with dependency injection

### Scala-Compatible Design
- **Immutable Data Structures**: Names, config and rule tables are frozen
- **Functional Results**: `RuleOutcome` is either a refined name or a finished label
- **Pure Functions**: Every rule is side-effect free

## Name Cultures

### Chinese/English
- Spelt in full when it fits, prefix included
- Otherwise given names become initials; surnames stay in full
- If the initials still overflow, only the first one or two are kept

### Malay
- Father's name (e.g. "BIN BAHARUDIN") is dropped
- Mohammed/Mohamad variants become MD, Abdul variants become AD
- Only the first given name is kept, alongside any MD/AD

### Indian
- Father's name (e.g. "D/O NARAIN") is dropped
- Only the first given name is kept

## Usage Examples

```python
from nametape import NameTapeGenerator
from nametape.types import CultureType, NameInput

generator = NameTapeGenerator()

generator.generate_candidates(
    NameInput("TAN BEE LIAN", CultureType.CHINESE_ENGLISH, surname_indices=(0,)),
)
# Returns: ["TAN BEE LIAN"]

generator.generate_candidates(
    NameInput("ADYA D/O NARAIN", CultureType.INDIAN, surname_indices=(1, 2), rank="ME4-3", is_mdes=True),
)
# Returns: ["ME4-3 ADYA"]

generator.describe_rules(CultureType.MALAY)
# Returns the guideline text behind each step
```

## Error Handling

Generation never raises. Empty names, out-of-range surname indices and empty
ranks all produce a label, possibly an empty string. Only input decoding
(`CultureType.from_tag`) and configuration updates reject bad values.

## Thread Safety

The generator holds no mutable state after construction and can be shared
between threads.
"""

import logging
from collections.abc import Iterable

from nametape.services import (
    GENERAL_RULES,
    CandidateGenerationService,
    CultureType,
    NameFormattingService,
    NameInput,
    NameParsingService,
    NameTapeConfig,
    ParsedName,
    RulePipelineService,
    build_rule_sets,
)

logger = logging.getLogger("nametape")

# ════════════════════════════════════════════════════════════════════════════════
# MAIN NAME TAPE GENERATOR CLASS
# ════════════════════════════════════════════════════════════════════════════════


class NameTapeGenerator:
    """Main name tape generation service."""

    def __init__(self, config: NameTapeConfig | None = None):
        self._config = config or NameTapeConfig.create_default()
        self._parsing_service = NameParsingService(self._config)
        self._formatting_service = NameFormattingService(self._config)
        self._rule_sets = build_rule_sets(self._config, self._formatting_service)
        self._pipeline_service = RulePipelineService(self._formatting_service)
        self._candidate_service = CandidateGenerationService(self._rule_sets, self._pipeline_service)

    # Public API methods
    @property
    def character_limit(self) -> int:
        return self._config.character_limit

    def parse(self, name_input: NameInput) -> ParsedName:
        return self._parsing_service.parse(name_input)

    def generate_candidates(self, name_input: NameInput) -> list[str]:
        """
        Main API method: render every acceptable label for a name.

        Returns a non-empty list of distinct upper-case labels. The first entry
        is the reading of the full name.
        """
        parsed_name = self._parsing_service.parse(name_input)
        return self._candidate_service.generate_candidate_names(parsed_name)

    def generate_label(self, name_input: NameInput) -> str:
        """Return the label for the full-name reading."""
        return self.generate_candidates(name_input)[0]

    def generate_candidates_batch(self, name_inputs: Iterable[NameInput]) -> list[list[str]]:
        """Generate candidates for many records; each record is handled independently."""
        results = [self.generate_candidates(name_input) for name_input in name_inputs]
        logger.debug("generated labels for %d names", len(results))
        return results

    def budget_ratio(self, label: str) -> float:
        return self._formatting_service.budget_ratio(label)

    def describe_rules(self, culture: CultureType | str) -> list[str]:
        """Human-readable guidelines applied to a culture, prefix rules first."""
        culture = CultureType.from_tag(culture)
        return [rule.name for rule in (*GENERAL_RULES, *self._rule_sets[culture])]
