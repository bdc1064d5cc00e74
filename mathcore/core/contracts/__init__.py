"""
Contract Validation Module

Валидация JSON запросов UI к вычислительному ядру.
"""

from .validators import (
    ContractValidator,
    MatrixRequestValidator,
    PlotRequestValidator,
    PrimeRequestValidator,
    QuadraticRequestValidator,
    SchemaLoader,
    validate_matrix_request,
    validate_plot_request,
    validate_prime_request,
    validate_quadratic_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixRequestValidator",
    "QuadraticRequestValidator",
    "PrimeRequestValidator",
    "PlotRequestValidator",
    # Functions
    "validate_matrix_request",
    "validate_quadratic_request",
    "validate_prime_request",
    "validate_plot_request",
]
