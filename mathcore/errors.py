"""
Errors — таксономия ошибок математического ядра

Структурные ошибки (валидация, парсинг, порядок матриц, вырожденность)
прерывают операцию целиком и несут человекочитаемое сообщение для UI.

Ошибки отдельной точки вычисления (DomainFailure) исключениями НЕ являются:
скомпилированная функция возвращает None ("не определено в этой точке"),
чтобы итеративный вызывающий код (plotter) мог пропустить точку.
"""


class MathCoreError(Exception):
    """Базовый класс всех структурных ошибок ядра."""

    pass


class ValidationError(MathCoreError, ValueError):
    """
    Некорректный или вне-доменный вход, пойманный до вычисления.

    Примеры: нечисловые коэффициенты, a == 0, целое < 2, нецелый вход.
    """

    pass


class ParseError(MathCoreError, ValueError):
    """
    Неизвестный идентификатор или синтаксическая ошибка в выражении.

    Attributes:
        token: Проблемный токен (если известен)
        position: Позиция токена во входной строке (если известна)
    """

    def __init__(self, message: str, token: str | None = None, position: int | None = None):
        super().__init__(message)
        self.token = token
        self.position = position


class OrderMismatch(MathCoreError, ValueError):
    """Нарушено предусловие на размерности матрицы/вектора."""

    pass


class SingularMatrixError(MathCoreError, ArithmeticError):
    """|det| в пределах толерантности от нуля, обращение невозможно."""

    pass


class ContractViolation(ValidationError):
    """
    Запрос от UI не соответствует JSON Schema контракту.

    Attributes:
        path: JSON path нарушившего поля (например, "$.matrix_a[1][0]")
    """

    def __init__(self, message: str, path: str = "$"):
        super().__init__(message)
        self.path = path
