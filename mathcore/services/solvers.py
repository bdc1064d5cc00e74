"""Solvers service: запросы Quadratic Solver и Prime Factorizer.

Оба обработчика валидируют запрос по JSON Schema, разбирают текстовые поля
и делегируют чистым функциям ядра.
"""

import logging
from typing import Any, Dict

from mathcore.core.contracts.validators import validate_prime_request, validate_quadratic_request
from mathcore.core.domain.factorization import FactorizationResult
from mathcore.core.domain.quadratic import QuadraticResult
from mathcore.core.math.primes import factorize
from mathcore.core.math.quadratic import solve_quadratic
from mathcore.errors import MathCoreError
from mathcore.services.text_input import parse_coefficient, parse_integer_text

logger = logging.getLogger(__name__)


def solve_quadratic_request(request: Dict[str, Any]) -> QuadraticResult:
    """
    Решение ax² + bx + c = 0 по запросу {"a", "b", "c"}.

    Текстовые коэффициенты разбираются по числовому префиксу ("2x" → 2).

    Raises:
        ContractViolation: Запрос не соответствует quadratic_request.json
        ValidationError: Нечисловой коэффициент или a == 0
    """
    validate_quadratic_request(request)
    try:
        a = parse_coefficient(request["a"], "a")
        b = parse_coefficient(request["b"], "b")
        c = parse_coefficient(request["c"], "c")
        return solve_quadratic(a, b, c)
    except MathCoreError as e:
        logger.info("Quadratic request rejected: %s", e)
        raise


def factorize_request(request: Dict[str, Any]) -> FactorizationResult:
    """
    Разложение на простые множители по запросу {"number"}.

    Raises:
        ContractViolation: Запрос не соответствует prime_request.json
        ValidationError: Не целое, < 2 или больше 2^53 - 1
    """
    validate_prime_request(request)
    try:
        return factorize(parse_integer_text(request["number"]))
    except MathCoreError as e:
        logger.info("Factorization request rejected: %s", e)
        raise
