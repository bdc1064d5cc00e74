"""
UI-facing services.

Обработчики запросов экранов калькулятора: валидация контракта, разбор
текстовых полей, вызов ядра, типизированный результат.
"""

from mathcore.services.calculator import CalculationOutcome, calculate
from mathcore.services.matrix_operations import (
    MatrixOperation,
    MatrixOperationResult,
    run_matrix_operation,
)
from mathcore.services.plotting import (
    PlotResult,
    build_plot,
    find_local_extrema,
    format_as_pi,
    sample_curve,
)
from mathcore.services.solvers import factorize_request, solve_quadratic_request

__all__ = [
    # Calculator
    "CalculationOutcome",
    "calculate",
    # Plotting
    "PlotResult",
    "build_plot",
    "find_local_extrema",
    "format_as_pi",
    "sample_curve",
    # Matrix
    "MatrixOperation",
    "MatrixOperationResult",
    "run_matrix_operation",
    # Solvers
    "factorize_request",
    "solve_quadratic_request",
]
