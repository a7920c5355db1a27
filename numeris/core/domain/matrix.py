"""
DenseMatrix — Плотная 2-D матрица float32

Pydantic модель: elements (список строк) + явные rows/columns.
Индексация с нуля: для матрицы 3x3 верхний левый элемент — (0, 0).

Создание напрямую НЕ проверяет форму (legacy гибкость): можно создать
матрицу со строками разной длины. Для проверки используется is_valid().
Конструкторы zeros/numbered/identity и мутаторы set_row/set_column
всегда сохраняют инвариант формы.

add/subtract/transpose предполагают валидные входы, возвращают новую
матрицу и не изменяют операнды.

НЕТ умножения матриц, обращения, детерминанта, разложений.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from numeris.core.contracts.validators import validate_dense_matrix
from numeris.core.errors import DimensionMismatch, IndexOutOfBounds
from numeris.core.float32 import f32, round_f32, round_f32_row


def _check_dimension(value: int, name: str) -> None:
    if value < 0:
        raise DimensionMismatch(f"{name} must be non-negative, got {value}")


# =============================================================================
# DENSE MATRIX MODEL
# =============================================================================


class DenseMatrix(BaseModel):
    """
    Плотная матрица rows x columns со значениями float32.

    Example:
        >>> matrix = DenseMatrix(elements=[[1.0, 2.0], [3.0, 4.0]], rows=2, columns=2)
        >>> matrix.is_valid()
        True
    """

    elements: list[list[float]] = Field(default_factory=list, description="Строки матрицы")
    rows: int = Field(..., ge=0, description="Количество строк")
    columns: int = Field(..., ge=0, description="Количество столбцов")

    @field_validator("elements")
    @classmethod
    def round_elements_to_float32(cls, v: list[list[float]]) -> list[list[float]]:
        """Округление всех элементов до float32 (форма не проверяется)."""
        return [round_f32_row(row) for row in v]

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "DenseMatrix":
        """Матрица rows x columns, заполненная нулями."""
        _check_dimension(rows, "rows")
        _check_dimension(columns, "columns")
        return cls(
            elements=[[0.0] * columns for _ in range(rows)],
            rows=rows,
            columns=columns,
        )

    @classmethod
    def numbered(cls, rows: int, columns: int) -> "DenseMatrix":
        """
        Матрица, пронумерованная по строкам начиная с 1.0.

        Example:
            >>> print(DenseMatrix.numbered(2, 4))
            [1.0, 2.0, 3.0, 4.0]
            [5.0, 6.0, 7.0, 8.0]
        """
        matrix = cls.zeros(rows, columns)
        value = f32(0.0)
        for i in range(rows):
            for j in range(columns):
                value = value + f32(1.0)
                matrix.elements[i][j] = float(value)
        return matrix

    @classmethod
    def identity(cls, dimension: int) -> "DenseMatrix":
        """Единичная матрица dimension x dimension."""
        matrix = cls.zeros(dimension, dimension)
        for i in range(dimension):
            matrix.elements[i][i] = 1.0
        return matrix

    # -------------------------------------------------------------------------
    # Инспекция
    # -------------------------------------------------------------------------

    def dimensions(self) -> tuple[int, int]:
        """Размеры матрицы (rows, columns)."""
        return (self.rows, self.columns)

    def is_valid(self) -> bool:
        """
        Проверка инварианта формы.

        Returns:
            True если строк ровно rows и длина каждой строки == columns.
            Никогда не бросает исключение.
        """
        if len(self.elements) != self.rows:
            return False
        return all(len(row) == self.columns for row in self.elements)

    def format_rows(self) -> str:
        """Построчное текстовое представление (одна строка матрицы на линию)."""
        return "\n".join(str(row) for row in self.elements)

    def __str__(self) -> str:
        return self.format_rows()

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    def _check_position(self, row: int, column: int) -> None:
        if not (0 <= row < self.rows) or not (0 <= column < self.columns):
            raise IndexOutOfBounds(
                f"Position ({row}, {column}) outside the matrix bounds. "
                f"Rows must be 0..{self.rows - 1}, columns must be 0..{self.columns - 1}"
            )

    def get(self, row: int, column: int) -> float:
        """
        Элемент в позиции (row, column).

        Raises:
            IndexOutOfBounds: Если позиция вне [0, rows) x [0, columns)
        """
        self._check_position(row, column)
        return self.elements[row][column]

    def set(self, row: int, column: int, value: float) -> None:
        """
        Замена элемента в позиции (row, column).

        Raises:
            IndexOutOfBounds: Если позиция вне [0, rows) x [0, columns)
        """
        self._check_position(row, column)
        self.elements[row][column] = round_f32(value)

    # -------------------------------------------------------------------------
    # Мутаторы
    # -------------------------------------------------------------------------

    def scale(self, value: float) -> None:
        """Умножение всех элементов на value (in place)."""
        factor = f32(value)
        for i in range(self.rows):
            for j in range(self.columns):
                self.elements[i][j] = float(f32(self.elements[i][j]) * factor)

    def set_row(self, index: int, values: list[float]) -> None:
        """
        Замена строки index на values.

        Raises:
            IndexOutOfBounds: Если index вне [0, rows)
            DimensionMismatch: Если len(values) != columns
        """
        if not 0 <= index < self.rows:
            raise IndexOutOfBounds(f"Row {index} outside 0..{self.rows - 1}")
        if len(values) != self.columns:
            raise DimensionMismatch(
                f"Row of length {len(values)} does not match {self.columns} columns"
            )
        self.elements[index] = round_f32_row(list(values))

    def set_column(self, index: int, values: list[float]) -> None:
        """
        Замена столбца index на values.

        Raises:
            IndexOutOfBounds: Если index вне [0, columns)
            DimensionMismatch: Если len(values) != rows
        """
        if not 0 <= index < self.columns:
            raise IndexOutOfBounds(f"Column {index} outside 0..{self.columns - 1}")
        if len(values) != self.rows:
            raise DimensionMismatch(
                f"Column of length {len(values)} does not match {self.rows} rows"
            )
        for i, value in enumerate(values):
            self.elements[i][index] = round_f32(value)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def transpose(self) -> "DenseMatrix":
        return transpose(self)

    def __add__(self, other: "DenseMatrix") -> "DenseMatrix":
        return add(self, other)

    def __sub__(self, other: "DenseMatrix") -> "DenseMatrix":
        return subtract(self, other)

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """JSON-совместимый payload (контракт dense_matrix)."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "DenseMatrix":
        """
        Создание из payload с проверкой JSON Schema контракта.

        Форма (длины строк) контрактом не проверяется, см. is_valid().

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
        """
        validate_dense_matrix(payload)
        return cls.model_validate(payload)


# =============================================================================
# MODULE-LEVEL КОНСТРУКТОРЫ И ОПЕРАЦИИ
# =============================================================================


def zeros(rows: int, columns: int) -> DenseMatrix:
    """Нулевая матрица rows x columns."""
    return DenseMatrix.zeros(rows, columns)


def numbered(rows: int, columns: int) -> DenseMatrix:
    """Матрица, пронумерованная по строкам начиная с 1.0."""
    return DenseMatrix.numbered(rows, columns)


def identity(dimension: int) -> DenseMatrix:
    """Единичная матрица dimension x dimension."""
    return DenseMatrix.identity(dimension)


def _check_same_shape(left: DenseMatrix, right: DenseMatrix, operation: str) -> None:
    if left.dimensions() != right.dimensions():
        raise DimensionMismatch(
            f"Matrices must be of the same size to perform matrix {operation}: "
            f"{left.dimensions()} vs {right.dimensions()}"
        )


def add(left: DenseMatrix, right: DenseMatrix) -> DenseMatrix:
    """
    Поэлементная сумма left + right (новая матрица).

    Raises:
        DimensionMismatch: Если размеры различаются
    """
    _check_same_shape(left, right, "addition")
    result = DenseMatrix.zeros(left.rows, left.columns)
    for i in range(left.rows):
        for j in range(left.columns):
            result.elements[i][j] = float(f32(left.elements[i][j]) + f32(right.elements[i][j]))
    return result


def subtract(left: DenseMatrix, right: DenseMatrix) -> DenseMatrix:
    """
    Поэлементная разность left - right (новая матрица).

    Порядок важен: right вычитается из left.

    Raises:
        DimensionMismatch: Если размеры различаются
    """
    _check_same_shape(left, right, "subtraction")
    result = DenseMatrix.zeros(left.rows, left.columns)
    for i in range(left.rows):
        for j in range(left.columns):
            result.elements[i][j] = float(f32(left.elements[i][j]) - f32(right.elements[i][j]))
    return result


def transpose(matrix: DenseMatrix) -> DenseMatrix:
    """Транспонированная матрица columns x rows: result[i][j] = matrix[j][i]."""
    result = DenseMatrix.zeros(matrix.columns, matrix.rows)
    for i in range(matrix.columns):
        for j in range(matrix.rows):
            result.elements[i][j] = matrix.elements[j][i]
    return result
