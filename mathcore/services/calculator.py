"""Calculator service: текст дисплея → результат для Basic/Scientific режимов.

Дисплей показывает либо отформатированное значение, либо "Error".
Исключения наружу не выходят: evaluator возвращает None при любой ошибке.
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional

from mathcore.config import DEFAULT_CONFIG, EngineConfig
from mathcore.core.expression.evaluator import (
    evaluate_scientific,
    format_display_value,
    safe_evaluate,
)

logger = logging.getLogger(__name__)

ERROR_DISPLAY: Final[str] = "Error"


@dataclass(frozen=True)
class CalculationOutcome:
    """Результат вычисления дисплея калькулятора."""

    expression: str
    value: Optional[float]
    display: str
    is_error: bool


def format_display_text(value: float, significant_digits: int) -> str:
    """
    Текст дисплея: целые без дробной части, остальное до significant_digits цифр.

    Examples:
        >>> format_display_text(4.0, 12)
        '4'
        >>> format_display_text(0.30000000000000004, 12)
        '0.3'
    """
    return f"{value:.{significant_digits}g}"


def calculate(
    display: str,
    scientific: bool = False,
    degree_mode: bool = True,
    config: EngineConfig = DEFAULT_CONFIG,
) -> CalculationOutcome:
    """
    Вычисление текста дисплея.

    Args:
        display: Текст дисплея, например "2 + 2 * 3" или "sin(30) + π"
        scientific: True — научный режим (функции, π, e, ^)
        degree_mode: Единицы аргументов тригонометрии в научном режиме
        config: Параметры ядра (точность дисплея)

    Returns:
        CalculationOutcome с is_error=True, если выражение не вычислилось
    """
    if scientific:
        value = evaluate_scientific(display, is_degree_mode=degree_mode)
    else:
        value = safe_evaluate(display)

    if value is None:
        logger.info("Calculation failed for %r", display)
        return CalculationOutcome(expression=display, value=None, display=ERROR_DISPLAY, is_error=True)

    rounded = format_display_value(value, config.display_significant_digits)
    return CalculationOutcome(
        expression=display,
        value=rounded,
        display=format_display_text(rounded, config.display_significant_digits),
        is_error=False,
    )
