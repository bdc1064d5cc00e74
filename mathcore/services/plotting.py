"""
Plotting service — дискретизация кривой и поиск локальных экстремумов

Graph Plotter вычисляет функцию в каждой пиксельной колонке видимого
диапазона x. Здесь собрана численная часть этого процесса:

- sample_curve: точки кривой, разбитые на непрерывные участки.
  Участок прерывается на неопределённой точке (None) и на скачке
  |Δy| > max_jump (вертикальная асимптота, например tan(x) у π/2).
- find_local_extrema: строгие локальные max/min на равномерной сетке,
  сравнение с соседями x ± step; точки с неопределённым соседом
  пропускаются.
- format_as_pi: подпись x как кратного π для радианного режима.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Final, Optional

from mathcore.config import DEFAULT_CONFIG, EngineConfig
from mathcore.core.contracts.validators import validate_plot_request
from mathcore.core.domain.plot import CurveSample, Extremum, ExtremumKind
from mathcore.core.expression.function_parser import CompiledFunction, parse_function
from mathcore.core.math.numerical_safeguards import normalize_negative_zero, to_finite_float
from mathcore.errors import ValidationError

logger = logging.getLogger(__name__)

# Максимальный знаменатель дроби при подписи x/π
PI_LABEL_MAX_DENOMINATOR: Final[int] = 64
PI_LABEL_TOLERANCE: Final[float] = 1e-9

Function = Callable[[float], Optional[float]]


def _validate_range(x_min: float, x_max: float) -> tuple[float, float]:
    x_min = to_finite_float(x_min, "x_min")
    x_max = to_finite_float(x_max, "x_max")
    if x_max <= x_min:
        raise ValidationError(f"x_max must be greater than x_min, got [{x_min}, {x_max}]")
    return x_min, x_max


def _grid(x_min: float, count: int, step: float) -> list[float]:
    return [x_min + i * step for i in range(count)]


# =============================================================================
# CURVE SAMPLING
# =============================================================================


def sample_curve(
    func: Function,
    x_min: float,
    x_max: float,
    samples: int,
    max_jump: float | None = None,
) -> list[CurveSample]:
    """
    Равномерная дискретизация функции на [x_min, x_max].

    Args:
        func: Функция x → float | None (обычно CompiledFunction)
        x_min: Левая граница
        x_max: Правая граница (> x_min)
        samples: Количество точек (≥ 2), концы включены
        max_jump: Порог разрыва по |Δy| (default: EngineConfig.plot_jump_threshold)

    Returns:
        Точки слева направо. Неопределённая точка несёт номер участка,
        который она завершает; следующий определённый участок получает
        следующий номер.

    Raises:
        ValidationError: Пустой диапазон, samples < 2 или max_jump ≤ 0
    """
    x_min, x_max = _validate_range(x_min, x_max)
    if isinstance(samples, bool) or not isinstance(samples, int) or samples < 2:
        raise ValidationError(f"samples must be an integer >= 2, got {samples!r}")

    threshold = DEFAULT_CONFIG.plot_jump_threshold if max_jump is None else max_jump
    if threshold <= 0:
        raise ValidationError(f"max_jump must be positive, got {threshold}")

    step = (x_max - x_min) / (samples - 1)
    xs = _grid(x_min, samples, step)
    xs[-1] = x_max

    curve: list[CurveSample] = []
    segment = 0
    previous: float | None = None
    pending_break = False

    for x in xs:
        y = func(x)
        if y is None:
            if previous is not None:
                pending_break = True
            previous = None
            curve.append(CurveSample(x=x, y=None, segment=segment))
            continue

        if pending_break or (previous is not None and abs(y - previous) > threshold):
            segment += 1
        pending_break = False
        previous = y
        curve.append(CurveSample(x=x, y=y, segment=segment))

    return curve


# =============================================================================
# EXTREMA
# =============================================================================


def format_as_pi(value: float) -> str:
    """
    Подпись числа как кратного π (лучшая дробь со знаменателем ≤ 64).

    Examples:
        >>> format_as_pi(math.pi / 2)
        'π/2'
        >>> format_as_pi(-2 * math.pi)
        '-2π'
        >>> format_as_pi(3 * math.pi / 4)
        '3π/4'
    """
    if abs(value) < PI_LABEL_TOLERANCE:
        return "0"

    multiple = value / math.pi
    best_n = round(multiple)
    best_d = 1
    min_error = abs(multiple - best_n)

    if min_error >= PI_LABEL_TOLERANCE:
        for d in range(2, PI_LABEL_MAX_DENOMINATOR + 1):
            n = round(multiple * d)
            if n == 0:
                continue
            error = abs(multiple - n / d)
            if error < min_error:
                min_error = error
                best_n, best_d = n, d

    if best_n == 0:
        return "0"

    divisor = math.gcd(best_n, best_d)
    n, d = best_n // divisor, best_d // divisor
    sign = "-" if n < 0 else ""
    numerator = "" if abs(n) == 1 else str(abs(n))

    if d == 1:
        return f"{sign}{numerator}π"
    return f"{sign}{numerator}π/{d}"


def _format_coordinate(value: float, precision: int) -> str:
    return f"{normalize_negative_zero(round(value, precision)):.{precision}f}"


def find_local_extrema(
    func: Function,
    x_min: float,
    x_max: float,
    step: float,
    precision: int | None = None,
    radian_labels: bool = False,
) -> list[Extremum]:
    """
    Строгие локальные экстремумы на сетке x_min + i·step.

    Концевые узлы сетки не рассматриваются (нет соседа с одной стороны).
    Плато (равные соседи) экстремумом не считается.

    Args:
        func: Функция x → float | None
        x_min: Левая граница
        x_max: Правая граница (> x_min)
        step: Шаг сетки (> 0), обычно ширина пикселя в мировых координатах
        precision: Знаков после запятой в подписи (default: EngineConfig.extrema_precision)
        radian_labels: Подписывать x как кратное π

    Returns:
        Экстремумы слева направо

    Raises:
        ValidationError: Пустой диапазон или step ≤ 0
    """
    x_min, x_max = _validate_range(x_min, x_max)
    step = to_finite_float(step, "step")
    if step <= 0:
        raise ValidationError(f"step must be positive, got {step}")

    digits = DEFAULT_CONFIG.extrema_precision if precision is None else precision
    count = math.floor((x_max - x_min) / step + PI_LABEL_TOLERANCE) + 1
    xs = _grid(x_min, count, step)
    ys = [func(x) for x in xs]

    extrema: list[Extremum] = []
    for i in range(1, count - 1):
        y, prev_y, next_y = ys[i], ys[i - 1], ys[i + 1]
        if y is None or prev_y is None or next_y is None:
            continue

        if y > prev_y and y > next_y:
            kind = ExtremumKind.MAXIMUM
        elif y < prev_y and y < next_y:
            kind = ExtremumKind.MINIMUM
        else:
            continue

        x = xs[i]
        x_label = format_as_pi(x) if radian_labels else _format_coordinate(x, digits)
        extrema.append(
            Extremum(x=x, y=y, kind=kind, label=f"({x_label}, {_format_coordinate(y, digits)})")
        )

    return extrema


# =============================================================================
# PLOT REQUEST
# =============================================================================


@dataclass(frozen=True)
class PlotResult:
    """Результат построения одной кривой."""

    function: CompiledFunction
    samples: list[CurveSample]
    extrema: list[Extremum]

    @property
    def segment_count(self) -> int:
        defined = {s.segment for s in self.samples if s.y is not None}
        return len(defined)


def build_plot(request: Dict[str, Any], config: EngineConfig = DEFAULT_CONFIG) -> PlotResult:
    """
    Полная обработка запроса Graph Plotter.

    request: {"expression", "x_min", "x_max", "samples", "max_jump"?}
    Шаг поиска экстремумов равен шагу дискретизации.

    Raises:
        ContractViolation: Запрос не соответствует plot_request.json
        ParseError: Формула не разбирается
        ValidationError: x_max ≤ x_min
    """
    validate_plot_request(request)

    func = parse_function(request["expression"], probe_value=config.probe_value)
    x_min, x_max, samples = request["x_min"], request["x_max"], request["samples"]
    max_jump = request.get("max_jump", config.plot_jump_threshold)

    curve = sample_curve(func, x_min, x_max, samples, max_jump=max_jump)
    step = (x_max - x_min) / (samples - 1)
    extrema = find_local_extrema(func, x_min, x_max, step, precision=config.extrema_precision)

    logger.debug(
        "Plotted %r on [%s, %s]: %d samples, %d extrema", func.source, x_min, x_max, len(curve), len(extrema)
    )
    return PlotResult(function=func, samples=curve, extrema=extrema)
