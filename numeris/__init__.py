"""
numeris — small float32 numerical utilities

- Sequence generation (evenly spaced sample points)
- Composite Simpson's and trapezoidal quadrature
- Relative / percentage error metrics
- DenseMatrix with basic arithmetic
"""

import logging

from numeris.core.domain import (
    DenseMatrix,
    IntegrationRequest,
    add,
    identity,
    numbered,
    subtract,
    transpose,
    zeros,
)
from numeris.core.errors import (
    DimensionMismatch,
    DivisionByZero,
    IndexOutOfBounds,
    InvalidBounds,
    InvalidStepCount,
    NumericsError,
)
from numeris.core.math import (
    DEFAULT_SPACING,
    QuadratureRule,
    SpacingMode,
    generate,
    integrate,
    percentage_error,
    relative_error,
    sin_x,
    sinc_x,
    simpsons,
    trapezoidal,
    x_cubed,
)
from numeris.logging_config import disable_logging, enable_console_logging, set_level

# Библиотека молчит по умолчанию
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Errors
    "NumericsError",
    "InvalidBounds",
    "InvalidStepCount",
    "DimensionMismatch",
    "IndexOutOfBounds",
    "DivisionByZero",
    # Sequence
    "DEFAULT_SPACING",
    "SpacingMode",
    "generate",
    # Quadrature
    "IntegrationRequest",
    "QuadratureRule",
    "integrate",
    "simpsons",
    "trapezoidal",
    # Error metrics
    "percentage_error",
    "relative_error",
    # Integrands
    "sin_x",
    "sinc_x",
    "x_cubed",
    # Matrix
    "DenseMatrix",
    "zeros",
    "numbered",
    "identity",
    "add",
    "subtract",
    "transpose",
    # Logging
    "enable_console_logging",
    "set_level",
    "disable_logging",
]
