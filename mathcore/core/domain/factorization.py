"""
FactorizationResult — разложение целого числа на простые множители

Помимо списка множителей содержит представления, которые показывает
UI: степени простых, экспоненциальную форму, все делители и пары делителей.
"""

import math

from pydantic import BaseModel, Field, model_validator


class PrimePower(BaseModel):
    """Простое число в степени: prime^exponent."""

    prime: int = Field(..., ge=2)
    exponent: int = Field(..., ge=1)

    model_config = {"frozen": True}


class FactorizationResult(BaseModel):
    """
    Результат factorize(n).

    Инвариант: произведение factors == number.
    """

    number: int = Field(..., ge=2, description="Исходное число")
    factors: list[int] = Field(..., min_length=1, description="Простые множители по возрастанию")
    prime_powers: list[PrimePower] = Field(..., min_length=1, description="Группы p^k")
    exponential_form: str = Field(..., description="Например '2^3 × 3^2 × 5'")
    is_prime: bool = Field(..., description="n простое")
    divisors: list[int] = Field(..., description="Все делители по возрастанию")
    divisor_pairs: list[tuple[int, int]] = Field(..., description="Пары (d, n/d)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_product(self) -> "FactorizationResult":
        """Произведение множителей восстанавливает число"""
        product = math.prod(self.factors)
        if product != self.number:
            raise ValueError(f"product of factors {product} != number {self.number}")
        return self
