"""
Тесты для доменных моделей: QuadraticResult, EigenResult, FactorizationResult, plot

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Инварианты (число корней, произведение множителей, размер векторов)
3. Immutability (frozen=True)
4. Сериализацию/десериализацию JSON
"""

import json

import pytest
from pydantic import ValidationError

from mathcore.core.domain import (
    COMPLEX_EIGENVECTOR_PLACEHOLDER,
    CurveSample,
    EigenResult,
    Extremum,
    ExtremumKind,
    FactorizationResult,
    PrimePower,
    QuadraticResult,
    RootType,
    Vertex,
)

# =============================================================================
# QUADRATIC
# =============================================================================


class TestQuadraticResult:
    """Тесты для модели QuadraticResult"""

    @pytest.fixture
    def real_result(self) -> QuadraticResult:
        return QuadraticResult(
            discriminant=1.0,
            roots=[2.0, 1.0],
            root_type=RootType.REAL,
            vertex=Vertex(x=1.5, y=-0.25),
            axis_of_symmetry=1.5,
            vertex_form="y = (x - 1.5)² - 0.25",
        )

    def test_valid_creation(self, real_result: QuadraticResult) -> None:
        assert real_result.root_type == RootType.REAL
        assert real_result.vertex.x == 1.5

    def test_frozen(self, real_result: QuadraticResult) -> None:
        with pytest.raises(ValidationError):
            real_result.discriminant = 0.0

    def test_single_requires_one_root(self) -> None:
        with pytest.raises(ValidationError, match="requires 1 root"):
            QuadraticResult(
                discriminant=0.0,
                roots=[1.0, 1.0],
                root_type=RootType.SINGLE,
                vertex=Vertex(x=1.0, y=0.0),
                axis_of_symmetry=1.0,
                vertex_form="y = (x - 1)²",
            )

    def test_complex_requires_string_roots(self) -> None:
        with pytest.raises(ValidationError, match="does not match root_type"):
            QuadraticResult(
                discriminant=-4.0,
                roots=[1.0, 2.0],
                root_type=RootType.COMPLEX,
                vertex=Vertex(x=0.0, y=1.0),
                axis_of_symmetry=0.0,
                vertex_form="y = x² + 1",
            )

    def test_json_roundtrip(self, real_result: QuadraticResult) -> None:
        data = json.loads(real_result.model_dump_json())
        assert data["root_type"] == "real"
        assert QuadraticResult.model_validate(data) == real_result


# =============================================================================
# EIGEN
# =============================================================================


class TestEigenResult:
    def test_real(self) -> None:
        result = EigenResult(eigenvalues=(3.0, 2.0), eigenvectors=([0.0, 1.0], [1.0, 0.0]))
        assert not result.is_complex

    def test_complex(self) -> None:
        result = EigenResult(
            eigenvalues=("0.0000 + 1.0000i", "0.0000 - 1.0000i"),
            eigenvectors=(COMPLEX_EIGENVECTOR_PLACEHOLDER, COMPLEX_EIGENVECTOR_PLACEHOLDER),
        )
        assert result.is_complex

    def test_vector_size(self) -> None:
        with pytest.raises(ValidationError, match="2 components"):
            EigenResult(eigenvalues=(1.0, 1.0), eigenvectors=([1.0, 0.0, 0.0], [1.0, 0.0]))


# =============================================================================
# FACTORIZATION
# =============================================================================


class TestFactorizationResult:
    def test_product_invariant(self) -> None:
        with pytest.raises(ValidationError, match="product of factors"):
            FactorizationResult(
                number=12,
                factors=[2, 3],
                prime_powers=[PrimePower(prime=2, exponent=1), PrimePower(prime=3, exponent=1)],
                exponential_form="2 × 3",
                is_prime=False,
                divisors=[1, 2, 3, 4, 6, 12],
                divisor_pairs=[(1, 12), (2, 6), (3, 4)],
            )

    def test_prime_power_bounds(self) -> None:
        with pytest.raises(ValidationError):
            PrimePower(prime=1, exponent=1)
        with pytest.raises(ValidationError):
            PrimePower(prime=2, exponent=0)


# =============================================================================
# PLOT
# =============================================================================


class TestPlotModels:
    def test_undefined_sample(self) -> None:
        sample = CurveSample(x=0.0, y=None, segment=0)
        assert sample.y is None

    def test_negative_segment_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CurveSample(x=0.0, y=1.0, segment=-1)

    def test_extremum(self) -> None:
        extremum = Extremum(x=0.0, y=0.0, kind=ExtremumKind.MINIMUM, label="(0.00, 0.00)")
        assert extremum.kind.value == "minimum"
