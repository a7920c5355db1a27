"""
Sequence — генерация равномерных точек выборки

Последовательность точек [start, ..., end] для численного интегрирования.

Два режима (SpacingMode):
- ADDITIVE: current += interval (legacy). Совместим бит-в-бит с эталонными
  значениями, но накапливает drift: точки не строго равномерны, а при
  недолёте может появиться лишняя точка перед end (длина steps + 2).
- DIRECT: start + k * interval. Численно стабилен, длина всегда steps + 1
  (при start < end и шаге, различимом в float32).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Первый элемент == start (в float32), последний элемент == end
2. start == end → [end] независимо от steps
3. steps <= 0 → InvalidStepCount
"""

import logging
from enum import Enum
from typing import Final

import numpy as np

from numeris.core.errors import InvalidStepCount
from numeris.core.float32 import f32, validate_step_count

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class SpacingMode(str, Enum):
    """Способ вычисления промежуточных точек"""

    ADDITIVE = "additive"
    DIRECT = "direct"


# Legacy режим по умолчанию: эталонные значения квадратур получены на нём
DEFAULT_SPACING: Final[SpacingMode] = SpacingMode.ADDITIVE


# =============================================================================
# ГЕНЕРАЦИЯ
# =============================================================================


def _additive_walk(start: np.float32, end: np.float32, interval: np.float32) -> list[float]:
    points: list[float] = []
    current = start
    while current < end:
        points.append(float(current))
        advanced = current + interval
        if advanced <= current:
            # interval меньше ulp(current): цикл никогда не достигнет end
            raise InvalidStepCount(
                f"interval {float(interval)!r} is below float32 resolution "
                f"at {float(current)!r}, sequence cannot reach {float(end)!r}"
            )
        current = advanced
    points.append(float(end))
    return points


def _direct_scale(
    start: np.float32, end: np.float32, interval: np.float32, steps: int
) -> list[float]:
    points: list[float] = []
    for k in range(steps):
        point = start + f32(k) * interval
        if not point < end:
            break
        points.append(float(point))
    points.append(float(end))
    return points


def generate(
    start: float,
    end: float,
    steps: int,
    spacing: SpacingMode = DEFAULT_SPACING,
) -> list[float]:
    """
    Генерация последовательности точек от start до end.

    interval = (end - start) / steps вычисляется в float32. После прохода
    end добавляется безусловно, поэтому последний элемент всегда равен end.

    Args:
        start: Нижняя граница
        end: Верхняя граница
        steps: Количество интервалов (> 0)
        spacing: ADDITIVE (legacy, с drift) или DIRECT (start + k*interval)

    Returns:
        Список float (значения точно представимы в float32)

    Raises:
        InvalidStepCount: Если steps <= 0 или шаг не продвигает ADDITIVE walk

    Examples:
        >>> generate(0.0, 5.0, 5)
        [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
        >>> generate(2.0, 2.0, 7)
        [2.0]
    """
    validate_step_count(steps)

    start_f = f32(start)
    end_f = f32(end)
    interval = (end_f - start_f) / f32(steps)

    if SpacingMode(spacing) is SpacingMode.DIRECT:
        points = _direct_scale(start_f, end_f, interval, int(steps))
    else:
        points = _additive_walk(start_f, end_f, interval)

    logger.debug(
        "generated %d points on [%r, %r] (steps=%d, spacing=%s)",
        len(points),
        float(start_f),
        float(end_f),
        steps,
        SpacingMode(spacing).value,
    )
    return points
