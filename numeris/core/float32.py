"""
Float32 — Single-Precision Primitives

Все вычисления numeris выполняются в IEEE-754 binary32 (float32).
Это осознанное ограничение: результаты должны совпадать бит-в-бит с
эталонной float32 реализацией, поэтому каждая арифметическая операция
выполняется над numpy.float32, а наружу отдаётся обычный Python float,
содержащий точное float32 значение.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Промежуточные значения никогда не расширяются до float64
2. Публичные функции возвращают float (не numpy scalar)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

import numpy as np

from numeris.core.errors import InvalidStepCount

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Машинный epsilon float32 (2^-23)
EPS_FLOAT32: Final[float] = float(np.finfo(np.float32).eps)

# Максимальное конечное значение float32
MAX_FLOAT32: Final[float] = float(np.finfo(np.float32).max)


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def f32(value: float) -> np.float32:
    """
    Конверсия в numpy.float32 (round-to-nearest-even).

    Значения вне диапазона float32 превращаются в ±inf.

    Examples:
        >>> float(f32(0.5))
        0.5
        >>> float(f32(0.1))
        0.10000000149011612
    """
    with np.errstate(over="ignore"):
        return np.float32(value)


def round_f32(value: float) -> float:
    """
    Округление Python float до ближайшего float32.

    Returns:
        float, точно представимый в float32
    """
    return float(f32(value))


def round_f32_row(values: list[float]) -> list[float]:
    """Округление каждого элемента списка до float32 (новый список)."""
    return [round_f32(v) for v in values]


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечно.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_step_count(steps: int) -> None:
    """
    Проверка, что steps — положительное целое (int или numpy integer).

    Raises:
        InvalidStepCount: Если steps не целое (bool и float не принимаются) или steps <= 0
    """
    if isinstance(steps, bool) or not isinstance(steps, (int, np.integer)):
        raise InvalidStepCount(f"steps must be an integer, got {steps!r}")

    if steps <= 0:
        raise InvalidStepCount(f"steps must be positive, got {steps}")
