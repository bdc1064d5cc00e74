"""
Конфигурация ядра и настройка логирования.

EngineConfig — неизменяемая конфигурация (frozen dataclass) с параметрами,
которые UI может переопределить через переменные окружения MATHCORE_*.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class EngineConfig:
    """Параметры вычислительного ядра.

    - probe_value: точка пробного вызова скомпилированной функции
    - display_significant_digits: точность результата калькулятора
    - plot_jump_threshold: скачок |Δy| между соседними сэмплами, при котором
      кривая разрывается (асимптота)
    - extrema_precision: знаков после запятой в подписях экстремумов
    """
    probe_value: float = 1.0
    display_significant_digits: int = 12
    plot_jump_threshold: float = 1e3
    extrema_precision: int = 2
    log_level: str = "WARNING"

    def __post_init__(self):
        if not 1 <= self.display_significant_digits <= 17:
            raise ValueError(
                f"display_significant_digits must be in [1, 17], got {self.display_significant_digits}"
            )
        if self.plot_jump_threshold <= 0:
            raise ValueError(f"plot_jump_threshold must be positive, got {self.plot_jump_threshold}")
        if self.extrema_precision < 0:
            raise ValueError(f"extrema_precision must be non-negative, got {self.extrema_precision}")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Загрузка конфигурации из MATHCORE_* переменных окружения."""
        defaults = cls()
        return cls(
            probe_value=float(os.getenv("MATHCORE_PROBE_VALUE", defaults.probe_value)),
            display_significant_digits=int(
                os.getenv("MATHCORE_DISPLAY_DIGITS", defaults.display_significant_digits)
            ),
            plot_jump_threshold=float(
                os.getenv("MATHCORE_PLOT_JUMP_THRESHOLD", defaults.plot_jump_threshold)
            ),
            extrema_precision=int(os.getenv("MATHCORE_EXTREMA_PRECISION", defaults.extrema_precision)),
            log_level=os.getenv("MATHCORE_LOG_LEVEL", defaults.log_level),
        )


DEFAULT_CONFIG: Final[EngineConfig] = EngineConfig()


def setup_logging(level: str = "WARNING") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )
