"""
Примеры подынтегральных функций в float32.

Формат совместим с simpsons/trapezoidal: один аргумент float, результат float.
"""

import numpy as np

from numeris.core.float32 import f32


def x_cubed(x: float) -> float:
    """x^3"""
    return float(np.power(f32(x), f32(3.0)))


def sin_x(x: float) -> float:
    """sin(x)"""
    return float(np.sin(f32(x)))


def sinc_x(x: float) -> float:
    """
    sin(x) / x (ненормированный sinc).

    В x == 0 не определена (NaN): интегрировать от малого положительного
    значения, например 0.001.
    """
    value = f32(x)
    with np.errstate(invalid="ignore", divide="ignore"):
        return float(np.sin(value) / value)
