"""Truth-table descriptions of 4000- and 7400-series logic chips."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Callable

from logicchips.gates import and_, buffer, nand, nor, not_

Gate = Callable[..., int]
Row = tuple[tuple[int, ...], int]


@dataclass(frozen=True)
class Section:
    """One gate of a chip, with its pin labels and printed heading."""

    heading: str
    inputs: tuple[str, ...]
    output: str
    gate: Gate
    trailer: str = "\n\n"

    def rows(self) -> list[Row]:
        """Every input combination, lowest first, with the gate's output."""
        return [
            (combo, self.gate(*combo))
            for combo in product((0, 1), repeat=len(self.inputs))
        ]

    def render(self) -> str:
        """The section's truth table as printed text."""
        parts = [f"{self.heading}\n\n"]
        for combo, result in self.rows():
            cells = [f"{label} : {bit}" for label, bit in zip(self.inputs, combo)]
            cells.append(f"{self.output} : {result}")
            parts.append("\t".join(cells) + "\n")
        parts.append(self.trailer)
        return "".join(parts)


@dataclass(frozen=True)
class Chip:
    """A chip made of several gate sections."""

    part: str
    sections: tuple[Section, ...]

    def render(self) -> str:
        """All of the chip's truth tables, one after another."""
        return "".join(section.render() for section in self.sections)


def _numbered(
    heading: str, gate: Gate, count: int, letters: str, trailer: str = "\n\n"
) -> tuple[Section, ...]:
    return tuple(
        Section(
            heading=heading.format(n=n),
            inputs=tuple(f"{letter}{n}" for letter in letters),
            output=f"Y{n}",
            gate=gate,
            trailer=trailer,
        )
        for n in range(1, count + 1)
    )


def _chip_4000() -> tuple[Section, ...]:
    nors = tuple(
        Section(
            heading=f"NOR 4000 {n}",
            inputs=tuple(f"{pin}{letter}" for pin in "123"),
            output=f"O{letter}",
            gate=nor,
        )
        for n, letter in zip((1, 2), "AB")
    )
    inverter = Section(heading="Inverter 4000 1", inputs=("IC",), output="OC", gate=not_)
    return nors + (inverter,)


_CHIPS: dict[str, Chip] = {
    chip.part: chip
    for chip in (
        Chip("4000", _chip_4000()),
        Chip("4001", _numbered("NOR 4001 {n}", nor, 4, "AB")),
        Chip("7400", _numbered("NAND {n}", nand, 4, "AB")),
        Chip("7401", _numbered("NAND 7401 {n}", nand, 4, "AB")),
        Chip("7402", _numbered("NOR 7402 {n}", nor, 4, "AB")),
        Chip("7403", _numbered("NAND 7403 {n}", nand, 4, "AB")),
        Chip("7404", _numbered("Inverter 7404 {n}", not_, 6, "A")),
        Chip("7405", _numbered("Inverter 7405 {n}", not_, 6, "A")),
        Chip("7406", _numbered("Inverter 7406 {n}", not_, 6, "A")),
        Chip("7407", _numbered("Buffer 7407 {n}", buffer, 6, "A")),
        Chip("7408", _numbered("AND 7408 {n}", and_, 4, "AB")),
        Chip("7409", _numbered("AND 7409 {n}", and_, 4, "AB")),
        Chip("7410", _numbered("NAND 7401 {n}", nand, 3, "ABC", trailer="")),
        Chip("7411", _numbered("AND 7411 {n}", and_, 3, "ABC", trailer="")),
    )
}


def get_chip(part: str | int) -> Chip:
    """Look up a chip by its part number; raise ValueError if unknown."""
    key = str(part).strip()
    try:
        return _CHIPS[key]
    except KeyError:
        raise ValueError(f"unknown part: {part}") from None


def available_parts() -> list[str]:
    """Part numbers of every known chip, in ascending order."""
    return sorted(_CHIPS)