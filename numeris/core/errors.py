"""
Errors — таксономия исключений numeris

Все ошибки являются нарушениями контракта вызова (programming errors),
а не транзиентными сбоями: операция прерывается сразу, частичный результат
не возвращается, retry не предусмотрен.

Иерархия:
    NumericsError
    ├── InvalidBounds       (lower > upper, NaN/Inf границы)
    ├── InvalidStepCount    (steps <= 0, нечётный steps, stalled sequence)
    ├── DimensionMismatch   (несовпадение размеров матриц/векторов)
    ├── IndexOutOfBounds    (доступ за пределы матрицы)
    └── DivisionByZero      (нулевой знаменатель в error metrics)

ВАЖНО: исключения НЕ наследуются от ValueError, поэтому Pydantic-валидаторы
пропускают их наружу без оборачивания в ValidationError.
"""


class NumericsError(Exception):
    """Базовое исключение для всех нарушений контрактов numeris."""

    pass


class InvalidBounds(NumericsError):
    """
    Некорректные границы интегрирования.

    Возникает при lower > upper или если хотя бы одна граница NaN/Inf.
    """

    pass


class InvalidStepCount(NumericsError):
    """
    Некорректное количество шагов.

    Возникает при steps <= 0, при нечётном steps для квадратурных правил,
    а также когда шаг меньше разрешения float32 и последовательность
    перестаёт продвигаться.
    """

    pass


class DimensionMismatch(NumericsError):
    """Размеры операндов (матриц, строк, столбцов) не совпадают."""

    pass


class IndexOutOfBounds(NumericsError):
    """Индекс строки/столбца вне объявленных размеров матрицы."""

    pass


class DivisionByZero(NumericsError):
    """Знаменатель error metric (true value) равен нулю."""

    pass
