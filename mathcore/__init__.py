"""
mathcore — вычислительное ядро многофункционального калькулятора.

Компоненты:
- core.expression — разбор формул и безопасные evaluators
- core.math — матрицы, квадратные уравнения, простые множители
- core.domain — immutable модели результатов
- core.contracts — JSON Schema контракты запросов UI
- services — обработчики запросов UI
"""

__version__ = "1.0.0"
