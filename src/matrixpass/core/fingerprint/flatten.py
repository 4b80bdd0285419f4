"""Flattener — сериализация матрицы в строку.

Row-major обход (i снаружи, j внутри), каждое значение в канонической
десятичной записи: без ведущих нулей, '-' для отрицательных, без
разделителей. Соседние числа сливаются ("19" + "22" -> "1922"), строка
не декодируема однозначно, но именно она является входом digest.
"""

from matrixpass.core.domain.matrix import Matrix


def flatten_matrix(matrix: Matrix) -> str:
    """Конкатенация десятичных представлений всех ячеек в row-major порядке.

    Examples:
        >>> flatten_matrix(Matrix.from_rows([[19, 22], [43, 50]]))
        '19224350'
        >>> flatten_matrix(Matrix.from_rows([[-1, 0], [7, -20]]))
        '-107-20'
    """
    return "".join(str(cell) for row in matrix.rows for cell in row)
