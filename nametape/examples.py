"""
Reference names with the label each is expected to receive.

These are the worked examples from the name tape guidelines, one or two per
culture, covering the prefix rules and each abbreviation step.
"""
from __future__ import annotations

from dataclasses import dataclass

from nametape.types import CultureType, NameInput


@dataclass(frozen=True)
class ExampleName:
    name_input: NameInput
    expected_label: str


EXAMPLE_NAMES: tuple[ExampleName, ...] = (
    ExampleName(
        NameInput("TAN BEE LIAN", CultureType.CHINESE_ENGLISH, (0,), rank="CPT"),
        "TAN BEE LIAN",
    ),
    ExampleName(
        NameInput("TAN ZHI QING", CultureType.CHINESE_ENGLISH, (0,), rank="ME3-2", is_mdes=True),
        "ME3-2 TAN Z Q",
    ),
    ExampleName(
        NameInput("TAN JUN WEI", CultureType.CHINESE_ENGLISH, (0,), rank="CPT", is_doctor=True),
        "DR TAN JUN WEI",
    ),
    ExampleName(
        NameInput("ALEXANDER MAXIMUS CHONG CHEE KEONG", CultureType.CHINESE_ENGLISH, (2,), rank="ME2-2", is_mdes=True),
        "ME2-2 A M CHONG",
    ),
    ExampleName(
        NameInput("MOHAMED AHMAD BIN BAHARUDIN", CultureType.MALAY, (2, 3), rank="CPL"),
        "MD AHMAD",
    ),
    ExampleName(
        NameInput("ADYA D/O NARAIN", CultureType.INDIAN, (1, 2), rank="ME4-3", is_mdes=True),
        "ME4-3 ADYA",
    ),
)


def example_candidates(generator=None) -> list[tuple[ExampleName, list[str]]]:
    """Pair every example with the candidates the generator produces for it."""
    if generator is None:
        from nametape.generator import NameTapeGenerator

        generator = NameTapeGenerator()
    return [(example, generator.generate_candidates(example.name_input)) for example in EXAMPLE_NAMES]
