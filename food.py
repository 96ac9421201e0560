"""
Еда (точка) на поле.

Позиция выбирается случайно по всему полю и перевыбирается, пока попадает
на змейку. Когда свободного места мало, случайные попытки почти всегда
промахиваются, поэтому выбираем сразу из списка свободных клеток.
"""
import numpy as np

from config import FOOD, FREE_CELL_THRESHOLD
from snake import Coordinate


class BoardFullError(Exception):
    """На поле не осталось ни одной свободной клетки"""


class Food:
    def __init__(self, coordinate, color=FOOD):
        self.coordinate = coordinate
        self.color = color

    @property
    def row(self):
        return self.coordinate.row

    @property
    def column(self):
        return self.coordinate.column

    def __repr__(self):
        return f"Food({self.row}, {self.column})"


def occupancy_mask(rows, columns, snake):
    """Матрица поля: True там, где лежит змейка"""
    mask = np.zeros((rows, columns), dtype=bool)
    for row, column in snake.path:
        # Голова может быть за границей в момент проигрыша
        if 0 <= row < rows and 0 <= column < columns:
            mask[row, column] = True
    return mask


def _place_from_free_cells(rows, columns, snake, rng):
    free = np.argwhere(~occupancy_mask(rows, columns, snake))
    if len(free) == 0:
        raise BoardFullError(f"no free cells on {rows}x{columns} board")
    row, column = free[rng.integers(len(free))]
    return Coordinate(int(row), int(column))


def place_food(rows, columns, snake, rng, color=FOOD):
    """
    Новая еда в случайной свободной клетке.

    rng: numpy.random.Generator игры
    """
    occupied = len(set(snake.path))
    if occupied >= FREE_CELL_THRESHOLD * rows * columns:
        return Food(_place_from_free_cells(rows, columns, snake, rng), color)

    for _ in range(rows * columns):
        candidate = Coordinate(int(rng.integers(rows)), int(rng.integers(columns)))
        if not snake.occupies(candidate):
            return Food(candidate, color)

    # Не повезло с попытками - берём из свободных
    return Food(_place_from_free_cells(rows, columns, snake, rng), color)
