"""
Core math modules для numeris

Генерация последовательностей, квадратурные правила и error metrics в float32.
Float32 примитивы живут в numeris.core.float32 (их использует и core.domain).
"""

# Float32 primitives (re-export)
from numeris.core.float32 import (
    EPS_FLOAT32,
    MAX_FLOAT32,
    f32,
    is_valid_float,
    round_f32,
    validate_finite,
    validate_step_count,
)

# Sequence generation
from numeris.core.math.sequence import (
    DEFAULT_SPACING,
    SpacingMode,
    generate,
)

# Quadrature
from numeris.core.math.quadrature import (
    QuadratureRule,
    integrate,
    simpson_weight,
    simpsons,
    trapezoid_weight,
    trapezoidal,
)

# Error metrics
from numeris.core.math.error_metrics import (
    PERCENT_SCALE,
    percentage_error,
    relative_error,
)

# Example integrands
from numeris.core.math.integrands import sin_x, sinc_x, x_cubed

__all__ = [
    # Float32 constants
    "EPS_FLOAT32",
    "MAX_FLOAT32",
    # Float32 functions
    "f32",
    "is_valid_float",
    "round_f32",
    "validate_finite",
    # Sequence
    "DEFAULT_SPACING",
    "SpacingMode",
    "generate",
    "validate_step_count",
    # Quadrature
    "QuadratureRule",
    "integrate",
    "simpson_weight",
    "simpsons",
    "trapezoid_weight",
    "trapezoidal",
    # Error metrics
    "PERCENT_SCALE",
    "percentage_error",
    "relative_error",
    # Integrands
    "sin_x",
    "sinc_x",
    "x_cubed",
]
