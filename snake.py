"""
Змейка: координаты, направления и движение по сетке.

Путь змейки хранится от головы к хвосту. Каждый тик спереди добавляется
новая голова, а хвост обрезается до целевой длины. Проверка столкновений
сделана отдельно от движения: сначала двигаем, потом смотрим, жива ли змейка.
"""
from collections import namedtuple
from enum import Enum

from config import INITIAL_SNAKE_LENGTH, SNAKE_START


Coordinate = namedtuple('Coordinate', ['row', 'column'])


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self):
        """Единичный вектор смещения (dx, dy)"""
        return self.value

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))


class Heading:
    """Текущее направление движения с запретом разворота назад"""

    def __init__(self, current=Direction.RIGHT):
        self.current = current

    def safe_change(self, requested):
        """
        Сменить направление.
        Разворот на 180° игнорируется (иначе голова въедет в шею).
        """
        if requested == self.current.opposite:
            return False
        self.current = requested
        return True

    def vector(self):
        return self.current.vector


class Snake:
    def __init__(self, start=SNAKE_START, length=INITIAL_SNAKE_LENGTH):
        self.length = length
        self.path = [Coordinate(*start)]

    @property
    def head(self):
        return self.path[0]

    def move(self, direction):
        """Сдвинуть голову на одну клетку и обрезать хвост"""
        dx, dy = direction.vector
        head = self.head
        self.path.insert(0, Coordinate(head.row + dx, head.column + dy))
        while len(self.path) > self.length:
            self.path.pop()

    def is_valid(self, rows, columns):
        """
        Жива ли змейка после хода.
        Крайний ряд клеток тоже считается стеной.
        """
        head = self.head
        if not (0 < head.row < rows and 0 < head.column < columns):
            return False

        # Голову пропускаем, ищем её среди остальных сегментов
        return head not in self.path[1:]

    def grow(self):
        self.length += 1

    def occupies(self, coordinate):
        return coordinate in self.path
