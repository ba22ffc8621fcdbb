"""Tests for drawing and composing readings."""

import random

import pytest

from divination import (
    Diviner,
    SequenceSource,
    Session,
    compose_lines,
    draw,
)
from hexagrams import build_hexagram_table, lookup_hexagram
from trigrams import Yao, trigram_by_index


class RecordingSource:
    """Records every randint range it is asked for."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0)


class TestComposeLines:
    @pytest.mark.parametrize("lower,upper", [(1, 8), (2, 5), (6, 3), (7, 7)])
    def test_lower_below_upper(self, lower, upper):
        lo, up = trigram_by_index(lower), trigram_by_index(upper)
        lines = compose_lines(lo, up)
        assert len(lines) == 6
        assert lines[:3] == lo.lines
        assert lines[3:] == up.lines


class TestSequenceSource:
    def test_replays_in_order(self):
        source = SequenceSource([3, 1, 4])
        assert [source.randint(1, 8) for _ in range(3)] == [3, 1, 4]

    def test_exhausted(self):
        source = SequenceSource([1])
        source.randint(1, 8)
        with pytest.raises(ValueError, match="ran out"):
            source.randint(1, 8)

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="outside 1-6"):
            SequenceSource([7]).randint(1, 6)


class TestDraw:
    def test_draw_order_and_ranges(self):
        source = RecordingSource([4, 6, 2])
        result = Diviner(source=source).draw()
        assert source.calls == [(1, 8), (1, 8), (1, 6)]
        assert result.numbers == (4, 6, 2)

    def test_qian_qian(self, fixed_diviner):
        result = fixed_diviner(1, 1, 3).draw()
        assert result.lower.name == result.upper.name == "乾"
        assert result.lines == (Yao.YANG,) * 6
        assert result.hexagram.name == "乾"
        assert result.hexagram.symbol == "䷀"
        assert result.hexagram.gua_ci == "元亨利贞。"

    def test_kun_kun(self, fixed_diviner):
        result = fixed_diviner(8, 8, 1).draw()
        assert result.lines == (Yao.YIN,) * 6
        assert result.hexagram.name == "坤"
        assert result.hexagram.gua_ci.startswith("元亨，利牝马之贞。")

    def test_missing_pair_falls_back(self, fixed_diviner):
        result = fixed_diviner(2, 5, 4).draw()
        assert result.hexagram.is_placeholder
        assert result.hexagram.name == "上巽下兑"
        assert len(set(result.hexagram.yao_ci)) == 6
        assert result.moving_line_text == "四爻爻辞待补全。"

    def test_fallback_independent_of_moving_line(self, fixed_diviner):
        results = [fixed_diviner(2, 5, m).draw() for m in range(1, 7)]
        assert {(r.hexagram.name, r.hexagram.symbol) for r in results} == {("上巽下兑", "☴☱")}

    def test_moving_line_does_not_change_lookup(self, fixed_diviner):
        hexagrams = {fixed_diviner(6, 6, m).draw().hexagram for m in range(1, 7)}
        assert hexagrams == {lookup_hexagram(6, 6)}

    def test_moving_line_text_and_yao(self, fixed_diviner):
        result = fixed_diviner(1, 1, 5).draw()
        assert result.moving_line_text == "九五：飞龙在天，利见大人。"
        assert result.moving_yao == Yao.YANG

    def test_custom_table(self):
        table = build_hexagram_table({(5, 2): lookup_hexagram(1, 1)})
        result = Diviner(table=table, source=SequenceSource([2, 5, 1])).draw()
        assert result.hexagram.name == "乾"

    def test_random_draws_stay_in_range(self):
        diviner = Diviner(source=random.Random(42))
        for _ in range(200):
            lower, upper, moving = diviner.draw().numbers
            assert 1 <= lower <= 8
            assert 1 <= upper <= 8
            assert 1 <= moving <= 6

    def test_seed_is_reproducible(self):
        a, b = Diviner(seed="abc"), Diviner(seed="abc")
        assert [a.draw().numbers for _ in range(10)] == [b.draw().numbers for _ in range(10)]

    def test_module_level_draw(self):
        result = draw(SequenceSource([3, 3, 2]))
        assert result.hexagram.name == "离"

    def test_result_is_frozen(self, fixed_diviner):
        result = fixed_diviner(1, 1, 1).draw()
        with pytest.raises(AttributeError):
            result.moving_line = 2


class TestCast:
    @pytest.mark.parametrize("moving", [0, 7])
    def test_bad_moving_line(self, moving):
        with pytest.raises(ValueError, match="Moving line"):
            Diviner().cast(1, 1, moving)

    def test_bad_trigram(self):
        with pytest.raises(ValueError, match="Trigram index"):
            Diviner().cast(9, 1, 1)

    def test_to_dict(self):
        data = Diviner().cast(8, 1, 6).to_dict()
        assert data["lower"] == 8
        assert data["upper"] == 1
        assert data["lines"] == [0, 0, 0, 1, 1, 1]
        assert data["name"] == "上乾下坤"
        assert data["placeholder"] is True
        assert data["moving_line_text"] == "上爻爻辞待补全。"


class TestSession:
    def test_starts_empty(self):
        assert Session().result is None

    def test_generate_replaces_result(self, fixed_diviner):
        session = Session(fixed_diviner(1, 1, 1, 8, 8, 2))
        first = session.generate()
        assert session.result is first
        second = session.generate()
        assert session.result is second
        assert second.hexagram.name == "坤"

    def test_clear(self, fixed_diviner):
        session = Session(fixed_diviner(1, 1, 1))
        session.generate()
        session.clear()
        assert session.result is None

    def test_table_exposed(self):
        assert (1, 1) in Session().table
