"""
EigenResult — собственные значения и векторы матрицы 2×2.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

COMPLEX_EIGENVECTOR_PLACEHOLDER: Final[str] = "Complex eigenvectors not calculated."


class EigenResult(BaseModel):
    """
    Пара собственных значений и соответствующих векторов.

    - Вещественный случай: eigenvalues — float (λ1 ≥ λ2),
      eigenvectors — единичные 2-векторы
    - Комплексный случай: eigenvalues — строки "re ± imi",
      eigenvectors — строки-заглушки
    """

    eigenvalues: tuple[float | str, float | str] = Field(..., description="(λ1, λ2)")
    eigenvectors: tuple[list[float] | str, list[float] | str] = Field(..., description="(v1, v2)")

    model_config = {"frozen": True}

    @field_validator("eigenvectors")
    @classmethod
    def validate_vector_size(cls, v):
        """Векторы должны быть двумерными"""
        for vector in v:
            if not isinstance(vector, str) and len(vector) != 2:
                raise ValueError(f"eigenvector must have 2 components, got {len(vector)}")
        return v

    @property
    def is_complex(self) -> bool:
        return any(isinstance(value, str) for value in self.eigenvalues)
