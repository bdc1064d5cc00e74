"""
Matrix Operations service — обработка запросов Matrix Calculator

Порядок обработки запроса:
1. Валидация против matrix_request.json (ContractViolation)
2. Ячейки → float (нечисловой текст → 0)
3. Диспетчеризация по MatrixOperation
4. MatrixOperationResult с заголовком для UI

Структурные ошибки ядра (OrderMismatch, SingularMatrixError) пробрасываются:
UI показывает их сообщение вместо результата.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from mathcore.core.contracts.validators import validate_matrix_request
from mathcore.core.domain.eigen import EigenResult
from mathcore.core.math.matrix import (
    Matrix,
    Vector,
    adjoint,
    cofactor_matrix,
    determinant,
    eigen_2x2,
    matrix_add,
    matrix_divide,
    matrix_inverse,
    matrix_multiply,
    matrix_subtract,
    minor_matrix,
    solve_linear_system,
    transpose,
)
from mathcore.errors import MathCoreError
from mathcore.services.text_input import parse_cell

logger = logging.getLogger(__name__)


class MatrixOperation(str, Enum):
    """Операции Matrix Calculator."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    TRANSPOSE = "transpose"
    DETERMINANT = "determinant"
    INVERSE = "inverse"
    ADJOINT = "adjoint"
    MINOR = "minor"
    COFACTOR = "cofactor"
    EIGEN = "eigen"
    SOLVE = "solve"

    @property
    def is_binary(self) -> bool:
        return self in _BINARY_OPERATIONS


_BINARY_OPERATIONS = frozenset(
    {MatrixOperation.ADD, MatrixOperation.SUBTRACT, MatrixOperation.MULTIPLY, MatrixOperation.DIVIDE}
)

_TITLES: Dict[MatrixOperation, str] = {
    MatrixOperation.ADD: "Result: A + B",
    MatrixOperation.SUBTRACT: "Result: A - B",
    MatrixOperation.MULTIPLY: "Result: A × B",
    MatrixOperation.DIVIDE: "Result: A × B⁻¹",
    MatrixOperation.TRANSPOSE: "Transpose of A",
    MatrixOperation.DETERMINANT: "Determinant of A",
    MatrixOperation.INVERSE: "Inverse of A",
    MatrixOperation.ADJOINT: "Adjoint of A",
    MatrixOperation.MINOR: "Minor Matrix of A",
    MatrixOperation.COFACTOR: "Cofactor Matrix of A",
    MatrixOperation.EIGEN: "Eigenvalues/Vectors of A",
    MatrixOperation.SOLVE: "Solution vector x",
}

_UNARY_MATRIX_FUNCTIONS: Dict[MatrixOperation, Callable[[Matrix], Matrix]] = {
    MatrixOperation.TRANSPOSE: transpose,
    MatrixOperation.INVERSE: matrix_inverse,
    MatrixOperation.ADJOINT: adjoint,
    MatrixOperation.MINOR: minor_matrix,
    MatrixOperation.COFACTOR: cofactor_matrix,
}

_BINARY_MATRIX_FUNCTIONS: Dict[MatrixOperation, Callable[[Matrix, Matrix], Matrix]] = {
    MatrixOperation.ADD: matrix_add,
    MatrixOperation.SUBTRACT: matrix_subtract,
    MatrixOperation.MULTIPLY: matrix_multiply,
    MatrixOperation.DIVIDE: matrix_divide,
}


@dataclass(frozen=True)
class MatrixOperationResult:
    """
    Результат операции Matrix Calculator.

    Заполнено ровно одно из полей scalar / matrix / vector / eigen.
    """

    operation: MatrixOperation
    title: str
    scalar: Optional[float] = None
    matrix: Optional[Matrix] = None
    vector: Optional[Vector] = None
    eigen: Optional[EigenResult] = None


def cells_to_matrix(cells: list[list[Any]]) -> Matrix:
    """Сетка ячеек UI → числовая матрица."""
    return [[parse_cell(cell) for cell in row] for row in cells]


def cells_to_vector(cells: list[Any]) -> Vector:
    """Столбец ячеек UI → числовой вектор."""
    return [parse_cell(cell) for cell in cells]


def run_matrix_operation(request: Dict[str, Any]) -> MatrixOperationResult:
    """
    Выполнение операции над матрицами из запроса UI.

    Args:
        request: {"operation", "matrix_a", "matrix_b"?, "vector_b"?}
            (ячейки — числа или текст)

    Returns:
        MatrixOperationResult

    Raises:
        ContractViolation: Запрос не соответствует matrix_request.json
        OrderMismatch: Порядки матриц не подходят для операции
        SingularMatrixError: Обращение вырожденной матрицы
    """
    validate_matrix_request(request)

    operation = MatrixOperation(request["operation"])
    title = _TITLES[operation]
    a = cells_to_matrix(request["matrix_a"])

    try:
        if operation in _BINARY_MATRIX_FUNCTIONS:
            b = cells_to_matrix(request["matrix_b"])
            result = MatrixOperationResult(
                operation=operation, title=title, matrix=_BINARY_MATRIX_FUNCTIONS[operation](a, b)
            )
        elif operation in _UNARY_MATRIX_FUNCTIONS:
            result = MatrixOperationResult(
                operation=operation, title=title, matrix=_UNARY_MATRIX_FUNCTIONS[operation](a)
            )
        elif operation is MatrixOperation.DETERMINANT:
            result = MatrixOperationResult(operation=operation, title=title, scalar=determinant(a))
        elif operation is MatrixOperation.EIGEN:
            result = MatrixOperationResult(operation=operation, title=title, eigen=eigen_2x2(a))
        else:
            vector_b = cells_to_vector(request["vector_b"])
            result = MatrixOperationResult(
                operation=operation, title=title, vector=solve_linear_system(a, vector_b)
            )
    except MathCoreError as e:
        logger.info("Matrix operation %s failed: %s", operation.value, e)
        raise

    logger.debug("Matrix operation %s completed", operation.value)
    return result
