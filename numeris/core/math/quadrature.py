"""
Quadrature — Composite Simpson's Rule & Trapezoidal Rule

Численное вычисление определённого интеграла по последовательности точек
из numeris.core.math.sequence.

ФОРМУЛЫ:
    Simpson:     ((upper - lower) / steps) * Σ w_i f(x_i) / 3
                 w_0 = w_last = 1, нечётные i → 4, чётные внутренние i → 2

    Trapezoidal: ((upper - lower) / (2 * steps)) * Σ w_i f(x_i)
                 w_0 = w_last = 1, внутренние i → 2

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. f вызывается ровно один раз на точку, в порядке возрастания
2. Веса определяются только по индексу: лишняя drift-точка (ADDITIVE)
   классифицируется по чётности как обычная внутренняя точка
3. Накопление суммы — последовательное сложение в float32
4. Входной контракт (границы, чётность steps) общий для обоих правил
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Final

import numpy as np

from numeris.core.domain.integration_request import IntegrationRequest
from numeris.core.float32 import f32
from numeris.core.math.sequence import DEFAULT_SPACING, SpacingMode, generate

logger = logging.getLogger(__name__)

# =============================================================================
# ВЕСОВЫЕ КОЭФФИЦИЕНТЫ
# =============================================================================

ENDPOINT_WEIGHT: Final[float] = 1.0

SIMPSON_ODD_WEIGHT: Final[float] = 4.0
SIMPSON_EVEN_WEIGHT: Final[float] = 2.0

TRAPEZOID_INTERIOR_WEIGHT: Final[float] = 2.0

# Делитель composite Simpson's rule
SIMPSON_DIVISOR: Final[float] = 3.0


# =============================================================================
# ENUMS
# =============================================================================


class QuadratureRule(str, Enum):
    """Квадратурное правило"""

    SIMPSONS = "simpsons"
    TRAPEZOIDAL = "trapezoidal"


# =============================================================================
# ВЕСА ПО ИНДЕКСУ
# =============================================================================


def simpson_weight(index: int, last_index: int) -> float:
    """
    Коэффициент Simpson's rule для точки с данным индексом.

    Examples:
        >>> [simpson_weight(i, 4) for i in range(5)]
        [1.0, 4.0, 2.0, 4.0, 1.0]
    """
    if index == 0 or index == last_index:
        return ENDPOINT_WEIGHT
    if index % 2 != 0:
        return SIMPSON_ODD_WEIGHT
    return SIMPSON_EVEN_WEIGHT


def trapezoid_weight(index: int, last_index: int) -> float:
    """
    Коэффициент trapezoidal rule для точки с данным индексом.

    Examples:
        >>> [trapezoid_weight(i, 3) for i in range(4)]
        [1.0, 2.0, 2.0, 1.0]
    """
    if index == 0 or index == last_index:
        return ENDPOINT_WEIGHT
    return TRAPEZOID_INTERIOR_WEIGHT


def _weighted_sum(
    request: IntegrationRequest,
    weight: Callable[[int, int], float],
    spacing: SpacingMode,
) -> np.float32:
    """Σ w_i f(x_i) в float32 по сгенерированной последовательности."""
    points = generate(request.lower, request.upper, request.steps, spacing)
    last_index = len(points) - 1

    total = f32(0.0)
    for index, point in enumerate(points):
        value = f32(request.integrand(point))
        total = total + value * f32(weight(index, last_index))

    logger.debug(
        "weighted sum over %d points (steps=%d): %r",
        len(points),
        request.steps,
        float(total),
    )
    return total


# =============================================================================
# QUADRATURE RULES
# =============================================================================


def simpsons(
    f: Callable[[float], float],
    lower: float,
    upper: float,
    steps: int,
    spacing: SpacingMode = DEFAULT_SPACING,
) -> float:
    """
    Composite Simpson's rule для определённого интеграла f на [lower, upper].

    Args:
        f: Чистая скалярная функция f(x) -> float
        lower: Нижняя граница
        upper: Верхняя граница (>= lower)
        steps: Количество интервалов (чётное, > 0)
        spacing: Режим генерации точек (default: ADDITIVE)

    Returns:
        Приближённое значение интеграла (float32 значение как float)

    Raises:
        InvalidBounds: Если lower > upper или границы NaN/Inf
        InvalidStepCount: Если steps <= 0 или нечётный

    Examples:
        >>> from numeris.core.math.integrands import x_cubed
        >>> simpsons(x_cubed, 2.0, 10.0, 4)
        2496.0
    """
    request = IntegrationRequest(integrand=f, lower=lower, upper=upper, steps=steps)
    total = _weighted_sum(request, simpson_weight, spacing)

    step_width = f32(request.width) / f32(request.steps)
    result = (step_width * total) / f32(SIMPSON_DIVISOR)

    logger.debug(
        "simpsons on [%r, %r] with %d steps: %r",
        request.lower,
        request.upper,
        request.steps,
        float(result),
    )
    return float(result)


def trapezoidal(
    f: Callable[[float], float],
    lower: float,
    upper: float,
    steps: int,
    spacing: SpacingMode = DEFAULT_SPACING,
) -> float:
    """
    Composite trapezoidal rule для определённого интеграла f на [lower, upper].

    Требует чётный steps (общий контракт с simpsons).

    Args:
        f: Чистая скалярная функция f(x) -> float
        lower: Нижняя граница
        upper: Верхняя граница (>= lower)
        steps: Количество интервалов (чётное, > 0)
        spacing: Режим генерации точек (default: ADDITIVE)

    Returns:
        Приближённое значение интеграла (float32 значение как float)

    Raises:
        InvalidBounds: Если lower > upper или границы NaN/Inf
        InvalidStepCount: Если steps <= 0 или нечётный
    """
    request = IntegrationRequest(integrand=f, lower=lower, upper=upper, steps=steps)
    total = _weighted_sum(request, trapezoid_weight, spacing)

    half_step = f32(request.width) / (f32(2.0) * f32(request.steps))
    result = half_step * total

    logger.debug(
        "trapezoidal on [%r, %r] with %d steps: %r",
        request.lower,
        request.upper,
        request.steps,
        float(result),
    )
    return float(result)


_RULES: Final[dict[QuadratureRule, Callable[..., float]]] = {
    QuadratureRule.SIMPSONS: simpsons,
    QuadratureRule.TRAPEZOIDAL: trapezoidal,
}


def integrate(
    f: Callable[[float], float],
    lower: float,
    upper: float,
    steps: int,
    rule: QuadratureRule = QuadratureRule.SIMPSONS,
    spacing: SpacingMode = DEFAULT_SPACING,
) -> float:
    """
    Диспетчер квадратурных правил.

    Args:
        rule: SIMPSONS или TRAPEZOIDAL (допускается строковое значение)

    Returns:
        Результат выбранного правила
    """
    return _RULES[QuadratureRule(rule)](f, lower, upper, steps, spacing=spacing)
