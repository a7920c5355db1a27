"""
Contract Validation Module

Валидация JSON payload'ов numeris (матрицы, отчёты квадратур).
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    get_validator,
    validate_dense_matrix,
    validate_quadrature_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "get_validator",
    "validate_dense_matrix",
    "validate_quadrature_report",
]
