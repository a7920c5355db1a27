"""
Domain models and value objects.

Contains IntegrationRequest and DenseMatrix.
"""

from numeris.core.domain.integration_request import IntegrationRequest
from numeris.core.domain.matrix import (
    DenseMatrix,
    add,
    identity,
    numbered,
    subtract,
    transpose,
    zeros,
)

__all__ = [
    # Integration request model
    "IntegrationRequest",
    # Matrix model
    "DenseMatrix",
    "zeros",
    "numbered",
    "identity",
    "add",
    "subtract",
    "transpose",
]
