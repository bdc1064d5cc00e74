"""
Prime Factorizer — разложение целого на простые множители пробным делением

Алгоритм prime_factorize:
1. Выделить все множители 2
2. Делить на нечётные кандидаты 3, 5, 7, ... пока candidate² ≤ остаток
3. Остаток > 2 — простой множитель

Инварианты: множители по возрастанию, произведение == n.
"""

import math
from itertools import groupby

from mathcore.core.domain.factorization import FactorizationResult, PrimePower
from mathcore.core.math.numerical_safeguards import MAX_SAFE_INTEGER, to_integer
from mathcore.errors import ValidationError


def _validate_input(n: object) -> int:
    value = to_integer(n, "n")
    if value < 2:
        raise ValidationError("Input must be an integer greater than 1.")
    if value > MAX_SAFE_INTEGER:
        raise ValidationError(
            f"Input number is too large for safe factorization (max {MAX_SAFE_INTEGER})."
        )
    return value


def prime_factorize(n: int) -> list[int]:
    """
    Простые множители n с кратностью.

    Args:
        n: Целое 2 ≤ n ≤ 2^53 - 1 (float с целым значением допускается)

    Returns:
        Множители по возрастанию

    Raises:
        ValidationError: n нецелое, < 2 или слишком велико

    Examples:
        >>> prime_factorize(360)
        [2, 2, 2, 3, 3, 5]
        >>> prime_factorize(97)
        [97]
    """
    remaining = _validate_input(n)
    factors: list[int] = []

    while remaining % 2 == 0:
        factors.append(2)
        remaining //= 2

    candidate = 3
    while candidate * candidate <= remaining:
        while remaining % candidate == 0:
            factors.append(candidate)
            remaining //= candidate
        candidate += 2

    if remaining > 2:
        factors.append(remaining)

    return factors


def group_prime_powers(factors: list[int]) -> list[PrimePower]:
    """[2, 2, 2, 3, 5] → [2^3, 3^1, 5^1]"""
    return [
        PrimePower(prime=prime, exponent=len(list(group)))
        for prime, group in groupby(factors)
    ]


def exponential_form(factors: list[int]) -> str:
    """
    Экспоненциальная запись разложения.

    Examples:
        >>> exponential_form([2, 2, 2, 3, 3, 5])
        '2^3 × 3^2 × 5'
    """
    parts = [
        str(power.prime) if power.exponent == 1 else f"{power.prime}^{power.exponent}"
        for power in group_prime_powers(factors)
    ]
    return " × ".join(parts)


def all_divisors(n: int) -> list[int]:
    """
    Все делители n по возрастанию (перебор до √n).

    Examples:
        >>> all_divisors(12)
        [1, 2, 3, 4, 6, 12]
    """
    value = to_integer(n, "n")
    if value < 1:
        raise ValidationError(f"n must be a positive integer, got {value}")

    small: list[int] = []
    large: list[int] = []
    for i in range(1, math.isqrt(value) + 1):
        if value % i == 0:
            small.append(i)
            if i != value // i:
                large.append(value // i)
    return small + large[::-1]


def divisor_pairs(n: int) -> list[tuple[int, int]]:
    """
    Пары делителей (d, n/d) с d ≤ n/d.

    Examples:
        >>> divisor_pairs(12)
        [(1, 12), (2, 6), (3, 4)]
    """
    divisors = all_divisors(n)
    half = (len(divisors) + 1) // 2
    return [(divisors[i], divisors[-1 - i]) for i in range(half)]


def factorize(n: int) -> FactorizationResult:
    """
    Полный результат разложения для UI.

    Делители перебираются до √n, поэтому для чисел близких к 2^53
    операция заметно дольше, чем prime_factorize.
    """
    value = _validate_input(n)
    factors = prime_factorize(value)
    return FactorizationResult(
        number=value,
        factors=factors,
        prime_powers=group_prime_powers(factors),
        exponential_form=exponential_form(factors),
        is_prime=len(factors) == 1,
        divisors=all_divisors(value),
        divisor_pairs=divisor_pairs(value),
    )
