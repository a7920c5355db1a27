"""
Тесты для генерации последовательностей точек

Проверяет:
1. Точные значения на целых и полуцелых шагах
2. Первый элемент == start, последний == end
3. start == end → одноэлементная последовательность
4. Длину: DIRECT → steps + 1, ADDITIVE → steps + 1 или steps + 2
5. Валидацию steps и защиту от бесконечного цикла
"""

import numpy as np
import pytest

from numeris.core.errors import InvalidStepCount
from numeris.core.float32 import round_f32
from numeris.core.math.sequence import (
    DEFAULT_SPACING,
    SpacingMode,
    generate,
    validate_step_count,
)

RANGES = [
    (0.0, 1.0, 10),
    (0.1, 0.7, 6),
    (-3.0, 2.5, 9),
    (2.0, 10.0, 4),
    (0.001, 2.0, 1000),
]


# =============================================================================
# ТОЧНЫЕ ЗНАЧЕНИЯ
# =============================================================================


class TestExactSequences:
    """Последовательности без drift"""

    def test_integer_steps(self) -> None:
        """generate(0, 5, 5) точно [0..5]"""
        assert generate(0.0, 5.0, 5) == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]

    def test_half_integer_steps(self) -> None:
        """Шаг 1.5 представим точно"""
        expected = [0.0, 1.5, 3.0, 4.5, 6.0, 7.5, 9.0, 10.5, 12.0, 13.5, 15.0]
        assert generate(0.0, 15.0, 10) == expected

    @pytest.mark.parametrize("spacing", list(SpacingMode))
    def test_integer_steps_both_modes(self, spacing: SpacingMode) -> None:
        """Оба режима совпадают при точно представимом шаге"""
        assert generate(2.0, 10.0, 4, spacing=spacing) == [2.0, 4.0, 6.0, 8.0, 10.0]

    def test_default_spacing_is_additive(self) -> None:
        """Legacy режим по умолчанию"""
        assert DEFAULT_SPACING is SpacingMode.ADDITIVE


# =============================================================================
# DRIFT
# =============================================================================


class TestAdditiveDrift:
    """Накопление ошибки в legacy additive режиме"""

    def test_drifted_tail_values(self) -> None:
        """current += 0.1 в float32 уходит от k * 0.1"""
        expected = [float(np.float32(v)) for v in (0.70000005, 0.8000001, 0.9000001)]
        assert generate(0.0, 1.0, 10)[7:10] == expected

    def test_extra_point_before_end(self) -> None:
        """Недолёт до end даёт steps + 2 точки"""
        points = generate(0.1, 0.7, 6)
        assert len(points) == 8
        assert points[-1] == round_f32(0.7)
        assert points[-2] < points[-1]

    def test_direct_mode_has_no_extra_point(self) -> None:
        assert len(generate(0.1, 0.7, 6, spacing=SpacingMode.DIRECT)) == 7


# =============================================================================
# ГРАНИЧНЫЕ СЛУЧАИ
# =============================================================================


class TestDegenerateRange:
    """start == end и start > end"""

    @pytest.mark.parametrize("steps", [1, 2, 7, 100])
    @pytest.mark.parametrize("spacing", list(SpacingMode))
    def test_equal_bounds_single_element(self, steps: int, spacing: SpacingMode) -> None:
        """start == end → [end] независимо от steps"""
        assert generate(3.25, 3.25, steps, spacing=spacing) == [3.25]

    def test_reversed_bounds_yield_end_only(self) -> None:
        """start > end → цикл не выполняется, только end"""
        assert generate(5.0, 1.0, 4) == [1.0]


class TestBoundsInvariant:
    """Первый элемент == start, последний == end"""

    @pytest.mark.parametrize("start,end,steps", RANGES)
    @pytest.mark.parametrize("spacing", list(SpacingMode))
    def test_first_and_last(self, start: float, end: float, steps: int, spacing: SpacingMode) -> None:
        points = generate(start, end, steps, spacing=spacing)
        assert points[0] == round_f32(start)
        assert points[-1] == round_f32(end)

    @pytest.mark.parametrize("start,end,steps", RANGES)
    @pytest.mark.parametrize("spacing", list(SpacingMode))
    def test_strictly_increasing(self, start: float, end: float, steps: int, spacing: SpacingMode) -> None:
        points = generate(start, end, steps, spacing=spacing)
        assert all(a < b for a, b in zip(points, points[1:]))

    @pytest.mark.parametrize("start,end,steps", RANGES)
    def test_values_are_float32(self, start: float, end: float, steps: int) -> None:
        """Все точки точно представимы в float32"""
        points = generate(start, end, steps)
        assert all(round_f32(p) == p for p in points)
        assert all(type(p) is float for p in points)


class TestSequenceLength:
    """Длина последовательности"""

    @pytest.mark.parametrize("start,end,steps", RANGES)
    def test_direct_length(self, start: float, end: float, steps: int) -> None:
        """DIRECT: ровно steps + 1 точек"""
        assert len(generate(start, end, steps, spacing=SpacingMode.DIRECT)) == steps + 1

    @pytest.mark.parametrize("start,end,steps", RANGES)
    def test_additive_length_allows_one_extra(self, start: float, end: float, steps: int) -> None:
        """ADDITIVE: drift может добавить одну лишнюю точку"""
        assert len(generate(start, end, steps, spacing=SpacingMode.ADDITIVE)) in (
            steps + 1,
            steps + 2,
        )

    def test_direct_points_are_scaled(self) -> None:
        """DIRECT: точки равны start + k * interval (float32)"""
        start, end, steps = np.float32(0.1), np.float32(0.7), 6
        interval = (end - start) / np.float32(steps)
        expected = [float(start + np.float32(k) * interval) for k in range(steps)]
        expected.append(float(end))

        assert generate(0.1, 0.7, 6, spacing=SpacingMode.DIRECT) == expected

    def test_spacing_accepts_string_value(self) -> None:
        assert generate(0.0, 1.0, 4, spacing="direct") == [0.0, 0.25, 0.5, 0.75, 1.0]


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


class TestStepValidation:
    """Проверка steps"""

    @pytest.mark.parametrize("steps", [0, -1, -10])
    def test_non_positive_steps_rejected(self, steps: int) -> None:
        with pytest.raises(InvalidStepCount, match="positive"):
            generate(0.0, 1.0, steps)

    @pytest.mark.parametrize("steps", [2.5, "4", True, None])
    def test_non_integer_steps_rejected(self, steps) -> None:
        with pytest.raises(InvalidStepCount, match="integer"):
            validate_step_count(steps)

    def test_numpy_integer_accepted(self) -> None:
        assert generate(0.0, 5.0, np.int64(5)) == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]

    def test_stalled_walk_rejected(self) -> None:
        """Шаг 0.2 меньше ulp(1e7) = 1.0: ADDITIVE walk не продвигается"""
        with pytest.raises(InvalidStepCount, match="resolution"):
            generate(1.0e7, 1.0e7 + 2.0, 10)
