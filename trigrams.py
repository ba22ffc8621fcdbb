"""
trigrams.py — the eight trigrams (八卦) in their traditional order.

Each trigram is three lines read bottom to top. The order below is the
Earlier Heaven sequence (乾 兑 离 震 巽 坎 艮 坤), not binary counting.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Sequence, Tuple


class Yao(IntEnum):
    """A single line: broken (yin) or solid (yang)."""
    YIN = 0
    YANG = 1


@dataclass(frozen=True)
class Trigram:
    """Immutable three-line unit."""
    index: int
    name: str
    pinyin: str
    symbol: str
    nature: str
    lines: Tuple[Yao, Yao, Yao]  # bottom -> top

    @property
    def label(self) -> str:
        return f"{self.symbol} {self.name}"


# ----- Canonical catalog -----
TRIGRAMS: Tuple[Trigram, ...] = (
    Trigram(1, "乾", "Qian", "☰", "天", (Yao.YANG, Yao.YANG, Yao.YANG)),
    Trigram(2, "兑", "Dui", "☱", "泽", (Yao.YANG, Yao.YANG, Yao.YIN)),
    Trigram(3, "离", "Li", "☲", "火", (Yao.YANG, Yao.YIN, Yao.YANG)),
    Trigram(4, "震", "Zhen", "☳", "雷", (Yao.YANG, Yao.YIN, Yao.YIN)),
    Trigram(5, "巽", "Xun", "☴", "风", (Yao.YIN, Yao.YANG, Yao.YANG)),
    Trigram(6, "坎", "Kan", "☵", "水", (Yao.YIN, Yao.YANG, Yao.YIN)),
    Trigram(7, "艮", "Gen", "☶", "山", (Yao.YIN, Yao.YIN, Yao.YANG)),
    Trigram(8, "坤", "Kun", "☷", "地", (Yao.YIN, Yao.YIN, Yao.YIN)),
)

TRIGRAM_COUNT = len(TRIGRAMS)

_BY_LINES: Dict[Tuple[Yao, ...], Trigram] = {t.lines: t for t in TRIGRAMS}


def trigram_by_index(index: int) -> Trigram:
    """Return the trigram numbered 1-8 in the traditional order."""
    if not 1 <= index <= TRIGRAM_COUNT:
        raise ValueError(f"Trigram index must be 1-{TRIGRAM_COUNT}, got {index}.")
    return TRIGRAMS[index - 1]


def trigram_from_lines(lines: Sequence[int]) -> Trigram:
    """Find the trigram whose lines (bottom to top) match."""
    if len(lines) != 3:
        raise ValueError(f"A trigram has exactly 3 lines, got {len(lines)}.")
    try:
        key = tuple(Yao(line) for line in lines)
    except ValueError:
        raise ValueError(f"Lines must be 0 (yin) or 1 (yang), got {list(lines)}.") from None
    return _BY_LINES[key]
