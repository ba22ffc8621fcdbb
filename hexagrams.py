"""
hexagrams.py — hexagram texts keyed by (upper trigram, lower trigram).

Only a handful of the 64 hexagrams ship with full text. Any other pair is
served by a placeholder built from its two trigrams, so a missing key is a
normal lookup outcome rather than a data error.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from trigrams import TRIGRAM_COUNT, Trigram

logger = logging.getLogger(__name__)

# Traditional names of the six positions, bottom to top
YAO_POSITIONS: Tuple[str, ...] = ("初", "二", "三", "四", "五", "上")

HexagramKey = Tuple[int, int]  # (upper index, lower index)


@dataclass(frozen=True)
class HexagramData:
    """Canonical text of one hexagram."""
    name: str
    symbol: str
    gua_ci: str                   # judgment
    yao_ci: Tuple[str, ...]       # line texts, first (bottom) to top
    yi_zhuan: str                 # 彖传
    xi_ci_zhuan: str              # 系辞传
    xiang_zhuan: str              # 象传
    is_placeholder: bool = False

    def __post_init__(self):
        if len(self.yao_ci) != 6:
            raise ValueError(f"Hexagram {self.name} needs 6 line texts, got {len(self.yao_ci)}.")

    def line_text(self, position: int) -> str:
        """Line text for position 1 (bottom) through 6 (top)."""
        if not 1 <= position <= 6:
            raise ValueError(f"Line position must be 1-6, got {position}.")
        return self.yao_ci[position - 1]


# === Shipped texts ===
_SHIPPED: Dict[HexagramKey, HexagramData] = {
    (1, 1): HexagramData(
        name="乾",
        symbol="䷀",
        gua_ci="元亨利贞。",
        yao_ci=(
            "初九：潜龙勿用。",
            "九二：见龙在田，利见大人。",
            "九三：君子终日乾乾，夕惕若，厉无咎。",
            "九四：或跃在渊，无咎。",
            "九五：飞龙在天，利见大人。",
            "上九：亢龙有悔。",
        ),
        yi_zhuan="《彖》：大哉乾元，万物资始，乃统天。",
        xi_ci_zhuan="《系辞》：乾以易知。",
        xiang_zhuan="《象》：天行健，君子以自强不息。",
    ),
    (8, 8): HexagramData(
        name="坤",
        symbol="䷁",
        gua_ci="元亨，利牝马之贞。君子有攸往，先迷后得主，利。西南得朋，东北丧朋。安贞吉。",
        yao_ci=(
            "初六：履霜，坚冰至。",
            "六二：直方大，不习无不利。",
            "六三：含章可贞。或从王事，无成有终。",
            "六四：括囊；无咎，无誉。",
            "六五：黄裳，元吉。",
            "上六：龙战于野，其血玄黄。",
        ),
        yi_zhuan="《彖》：至哉坤元，万物资生，乃顺承天。",
        xi_ci_zhuan="《系辞》：坤以简能。",
        xiang_zhuan="《象》：地势坤，君子以厚德载物。",
    ),
    (6, 6): HexagramData(
        name="坎",
        symbol="䷜",
        gua_ci="习坎，有孚，维心亨，行有尚。",
        yao_ci=(
            "初六：习坎，入于坎窞，凶。",
            "九二：坎有险，求小得。",
            "六三：来之坎坎，险且枕，入于坎窞，勿用。",
            "六四：樽酒簋贰，用缶，纳约自牖，终无咎。",
            "九五：坎不盈，祗既平，无咎。",
            "上六：系用徽纆，寘于丛棘，三岁不得，凶。",
        ),
        yi_zhuan="《彖》：习坎，重险也。",
        xi_ci_zhuan="《系辞》：坎，陷也。",
        xiang_zhuan="《象》：水洊至，习坎。君子以常德行，习教事。",
    ),
    (3, 3): HexagramData(
        name="离",
        symbol="䷝",
        gua_ci="利贞，亨。畜牝牛，吉。",
        yao_ci=(
            "初九：履错然，敬之无咎。",
            "六二：黄离，元吉。",
            "九三：日昃之离，不鼓缶而歌，则大耋之嗟，凶。",
            "九四：突如其来如，焚如，死如，弃如。",
            "六五：出涕沱若，戚嗟若，吉。",
            "上九：王用出征，有嘉折首，获匪其丑，无咎。",
        ),
        yi_zhuan="《彖》：离，丽也；日月丽乎天，百谷草木丽乎土。",
        xi_ci_zhuan="《系辞》：离，附也。",
        xiang_zhuan="《象》：明两作，离。大人以继明照于四方。",
    ),
}


def _check_key(key: HexagramKey) -> None:
    upper, lower = key
    if not (1 <= upper <= TRIGRAM_COUNT and 1 <= lower <= TRIGRAM_COUNT):
        raise ValueError(f"Hexagram key must be two trigram indices 1-{TRIGRAM_COUNT}, got {key}.")


def build_hexagram_table(
    extra: Optional[Mapping[HexagramKey, HexagramData]] = None,
) -> Mapping[HexagramKey, HexagramData]:
    """
    Build the read-only (upper, lower) -> text table.
    Entries in `extra` are added on top of the shipped texts.
    """
    table: Dict[HexagramKey, HexagramData] = dict(_SHIPPED)
    if extra:
        for key, data in extra.items():
            _check_key(key)
            table[key] = data
    logger.debug("Hexagram table built with %d of 64 entries", len(table))
    return MappingProxyType(table)


HEXAGRAM_TABLE = build_hexagram_table()


def lookup_hexagram(
    upper: int,
    lower: int,
    table: Mapping[HexagramKey, HexagramData] = HEXAGRAM_TABLE,
) -> Optional[HexagramData]:
    """Stored text for the pair, or None when the pair has none yet."""
    return table.get((upper, lower))


def fallback_hexagram(lower: Trigram, upper: Trigram) -> HexagramData:
    """Placeholder record for a pair without shipped text."""
    return HexagramData(
        name=f"上{upper.name}下{lower.name}",
        symbol=f"{upper.symbol}{lower.symbol}",
        gua_ci="该卦卦辞待补全。",
        yao_ci=tuple(f"{pos}爻爻辞待补全。" for pos in YAO_POSITIONS),
        yi_zhuan="易传内容待补全。",
        xi_ci_zhuan="系辞传内容待补全。",
        xiang_zhuan="象传内容待补全。",
        is_placeholder=True,
    )


def resolve_hexagram(
    lower: Trigram,
    upper: Trigram,
    table: Mapping[HexagramKey, HexagramData] = HEXAGRAM_TABLE,
) -> HexagramData:
    """Look up the pair (upper first) and fall back to a placeholder."""
    data = lookup_hexagram(upper.index, lower.index, table)
    if data is None:
        logger.debug("No text for (%d, %d); using placeholder", upper.index, lower.index)
        return fallback_hexagram(lower, upper)
    return data
