"""
Error Metrics — относительная и процентная ошибка

Сравнение наблюдаемого значения (например, результата квадратуры)
с известным эталонным значением.

ФОРМУЛЫ:
    relative_error   = |observed - true_val| / true_val
    percentage_error = relative_error * 100

Знаменатель знаковый: для отрицательного true_val результат отрицательный.
true_val == 0 → DivisionByZero (без inf/NaN sentinel).
"""

from typing import Final

from numeris.core.errors import DivisionByZero
from numeris.core.float32 import f32, validate_finite

# Множитель для перевода доли в проценты
PERCENT_SCALE: Final[float] = 100.0


def relative_error(observed: float, true_val: float) -> float:
    """
    Относительная ошибка observed относительно true_val (float32).

    Args:
        observed: Наблюдаемое (вычисленное) значение
        true_val: Известное точное значение

    Returns:
        |observed - true_val| / true_val

    Raises:
        DivisionByZero: Если true_val == 0 (в float32)
        ValueError: Если observed или true_val NaN/Inf

    Examples:
        >>> relative_error(3.0, 2.0)
        0.5
        >>> relative_error(2.0, 2.0)
        0.0
    """
    validate_finite(observed, "observed")
    validate_finite(true_val, "true_val")

    observed_f = f32(observed)
    true_f = f32(true_val)

    if true_f == 0:
        raise DivisionByZero(
            f"Relative error is undefined for true_val={true_val} "
            f"(zero in float32), observed={observed}"
        )

    return float(abs(observed_f - true_f) / true_f)


def percentage_error(observed: float, true_val: float) -> float:
    """
    Процентная ошибка: relative_error * 100 (float32).

    Raises:
        DivisionByZero: Если true_val == 0
        ValueError: Если observed или true_val NaN/Inf

    Examples:
        >>> percentage_error(3.0, 2.0)
        50.0
    """
    return float(f32(relative_error(observed, true_val)) * f32(PERCENT_SCALE))
