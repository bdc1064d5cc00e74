"""
Domain models and value objects.

Immutable результаты операций ядра: квадратное уравнение, собственные
значения 2×2, разложение на множители, точки графика.
"""

from mathcore.core.domain.eigen import COMPLEX_EIGENVECTOR_PLACEHOLDER, EigenResult
from mathcore.core.domain.factorization import FactorizationResult, PrimePower
from mathcore.core.domain.plot import CurveSample, Extremum, ExtremumKind
from mathcore.core.domain.quadratic import QuadraticResult, RootType, Vertex

__all__ = [
    # Quadratic
    "QuadraticResult",
    "RootType",
    "Vertex",
    # Eigen
    "EigenResult",
    "COMPLEX_EIGENVECTOR_PLACEHOLDER",
    # Factorization
    "FactorizationResult",
    "PrimePower",
    # Plot
    "CurveSample",
    "Extremum",
    "ExtremumKind",
]
