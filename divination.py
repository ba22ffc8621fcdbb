"""
divination.py — draw three numbers and turn them into a reading.

A draw picks the lower trigram (1-8), the upper trigram (1-8) and the
moving line (1-6), each uniformly and independently. The lower trigram
fills lines 1-3, the upper trigram lines 4-6, and the text is looked up
under the key (upper, lower).
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Tuple

from hexagrams import HEXAGRAM_TABLE, HexagramData, HexagramKey, resolve_hexagram
from trigrams import TRIGRAM_COUNT, Trigram, Yao, trigram_by_index

logger = logging.getLogger(__name__)

LINE_COUNT = 6


class RandomSource(Protocol):
    """Anything with an inclusive randint, e.g. random.Random."""

    def randint(self, a: int, b: int) -> int:
        ...


class SequenceSource:
    """Replays fixed numbers in order; used for manual casts and tests."""

    def __init__(self, values: Iterable[int]):
        self._values: List[int] = list(values)
        self._pos = 0

    def randint(self, a: int, b: int) -> int:
        if self._pos >= len(self._values):
            raise ValueError("SequenceSource ran out of values.")
        value = self._values[self._pos]
        self._pos += 1
        if not a <= value <= b:
            raise ValueError(f"Value {value} is outside {a}-{b}.")
        return value


@dataclass(frozen=True)
class DivinationResult:
    """Snapshot of one draw. Replaced whole on the next draw."""
    lower: Trigram
    upper: Trigram
    moving_line: int
    lines: Tuple[Yao, ...]  # bottom -> top
    hexagram: HexagramData

    @property
    def numbers(self) -> Tuple[int, int, int]:
        return self.lower.index, self.upper.index, self.moving_line

    @property
    def moving_yao(self) -> Yao:
        return self.lines[self.moving_line - 1]

    @property
    def moving_line_text(self) -> str:
        return self.hexagram.line_text(self.moving_line)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lower": self.lower.index,
            "upper": self.upper.index,
            "moving_line": self.moving_line,
            "lines": [int(line) for line in self.lines],
            "name": self.hexagram.name,
            "symbol": self.hexagram.symbol,
            "judgement": self.hexagram.gua_ci,
            "moving_line_text": self.moving_line_text,
            "placeholder": self.hexagram.is_placeholder,
        }


def compose_lines(lower: Trigram, upper: Trigram) -> Tuple[Yao, ...]:
    """Stack the lower trigram beneath the upper one."""
    return tuple(lower.lines) + tuple(upper.lines)


class Diviner:
    """Draws readings from a random source against a hexagram table."""

    def __init__(
        self,
        table: Mapping[HexagramKey, HexagramData] = HEXAGRAM_TABLE,
        source: Optional[RandomSource] = None,
        seed: Optional[str] = None,
    ):
        self.table = table
        if source is None:
            source = random.Random(seed) if seed is not None else random.Random()
        self.source = source

    def cast(self, lower_index: int, upper_index: int, moving_line: int) -> DivinationResult:
        """Build the reading for three given numbers."""
        if not 1 <= moving_line <= LINE_COUNT:
            raise ValueError(f"Moving line must be 1-{LINE_COUNT}, got {moving_line}.")

        lower = trigram_by_index(lower_index)
        upper = trigram_by_index(upper_index)
        hexagram = resolve_hexagram(lower, upper, self.table)

        return DivinationResult(
            lower=lower,
            upper=upper,
            moving_line=moving_line,
            lines=compose_lines(lower, upper),
            hexagram=hexagram,
        )

    def draw(self) -> DivinationResult:
        """Draw lower, upper and moving line, then cast."""
        lower_index = self.source.randint(1, TRIGRAM_COUNT)
        upper_index = self.source.randint(1, TRIGRAM_COUNT)
        moving_line = self.source.randint(1, LINE_COUNT)

        result = self.cast(lower_index, upper_index, moving_line)
        logger.debug(
            "Drew lower=%d upper=%d moving=%d -> %s",
            lower_index, upper_index, moving_line, result.hexagram.name,
        )
        return result


def draw(source: Optional[RandomSource] = None) -> DivinationResult:
    """One reading from the shipped table."""
    return Diviner(source=source).draw()


class Session:
    """Holds the current reading, if any."""

    def __init__(self, diviner: Optional[Diviner] = None):
        self.diviner = diviner or Diviner()
        self.result: Optional[DivinationResult] = None

    @property
    def table(self) -> Mapping[HexagramKey, HexagramData]:
        return self.diviner.table

    def generate(self) -> DivinationResult:
        self.result = self.diviner.draw()
        return self.result

    def clear(self) -> None:
        self.result = None
