"""
QuadraticResult — результат решения квадратного уравнения ax² + bx + c = 0

Immutable Pydantic модель: дискриминант, корни, тип корней, вершина
параболы, ось симметрии и запись в вершинной форме.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class RootType(str, Enum):
    """Природа корней"""

    SINGLE = "single"
    REAL = "real"
    COMPLEX = "complex"


# =============================================================================
# MODELS
# =============================================================================


class Vertex(BaseModel):
    """Вершина параболы (h, k)."""

    x: float = Field(..., description="h = -b / 2a")
    y: float = Field(..., description="k = a·h² + b·h + c")

    model_config = {"frozen": True}


class QuadraticResult(BaseModel):
    """
    Результат solve_quadratic.

    Корни:
    - REAL: два float, порядок (-b + √D) / 2a, (-b - √D) / 2a
    - SINGLE: один float, -b / 2a
    - COMPLEX: две строки "re + imi" / "re - imi"
    """

    discriminant: float = Field(..., description="b² - 4ac")
    roots: list[float | str] = Field(..., min_length=1, max_length=2, description="Корни")
    root_type: RootType = Field(..., description="Природа корней")
    vertex: Vertex = Field(..., description="Вершина параболы")
    axis_of_symmetry: float = Field(..., description="x = h")
    vertex_form: str = Field(..., min_length=1, description="y = a(x - h)² + k")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_roots_match_type(self) -> "QuadraticResult":
        """Число и тип корней согласованы с root_type"""
        expected = 1 if self.root_type == RootType.SINGLE else 2
        if len(self.roots) != expected:
            raise ValueError(
                f"root_type {self.root_type.value} requires {expected} root(s), got {len(self.roots)}"
            )

        want_str = self.root_type == RootType.COMPLEX
        for root in self.roots:
            if isinstance(root, str) != want_str:
                raise ValueError(f"root {root!r} does not match root_type {self.root_type.value}")
        return self
