"""
Plot models — точки кривой и экстремумы для Graph Plotter.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ExtremumKind(str, Enum):
    """Тип локального экстремума"""

    MAXIMUM = "maximum"
    MINIMUM = "minimum"


class CurveSample(BaseModel):
    """
    Точка кривой.

    y = None — функция не определена в x (кривая прерывается).
    segment — номер непрерывного участка: меняется после неопределённой
    точки и после скачка через асимптоту.
    """

    x: float
    y: float | None
    segment: int = Field(..., ge=0)

    model_config = {"frozen": True}


class Extremum(BaseModel):
    """Локальный максимум или минимум."""

    x: float
    y: float
    kind: ExtremumKind
    label: str = Field(..., description="Подпись '(x, y)'")

    model_config = {"frozen": True}
