"""
Игра: состояние и переходы между статусами.

  START -> RUNNING <-> PAUSED
  RUNNING -> OVER -> RESTART -> RUNNING
  любой статус -> EXIT

Один кадр = один вызов update(). Змейка сдвигается на клетку раз
в frames_per_cell кадров (тик), так что частота отрисовки и скорость
игры не связаны.
"""
import logging
from collections import namedtuple
from enum import Enum

import numpy as np

from config import (ROWS, COLUMNS, INITIAL_SNAKE_LENGTH, INITIAL_FRAMES_PER_CELL,
                    MIN_FRAMES_PER_CELL, SPEEDUP_EVERY)
from food import BoardFullError, place_food
from snake import Direction, Heading, Snake

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    START = "start"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"
    RESTART = "restart"
    EXIT = "exit"


class Command(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"
    QUIT = "quit"


MOVES = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
}

GameResult = namedtuple('GameResult', ['score', 'length', 'ticks', 'won'])


class Game:
    def __init__(self, rows=ROWS, columns=COLUMNS, score_store=None, rng=None, seed=None):
        self.rows = rows
        self.columns = columns
        self.score_store = score_store
        # Один генератор на всю игру
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.high_scores = score_store.read() if score_store is not None else []
        self.restart()
        self.status = GameStatus.START

    def restart(self):
        """Новая партия. История рекордов сохраняется."""
        self.snake = Snake()
        self.heading = Heading()
        self.food = place_food(self.rows, self.columns, self.snake, self.rng)
        self.frame = 0
        self.ticks = 0
        self.frames_per_cell = INITIAL_FRAMES_PER_CELL
        self.won = False
        self.status = GameStatus.RUNNING

    @property
    def score(self):
        return self.snake.length - INITIAL_SNAKE_LENGTH

    @property
    def result(self):
        return GameResult(self.score, self.snake.length, self.ticks, self.won)

    def handle(self, command):
        """Применить команду игрока"""
        if command == Command.QUIT:
            self.status = GameStatus.EXIT
            return

        if self.status == GameStatus.START:
            if command in MOVES:
                self.heading.safe_change(MOVES[command])
                self.status = GameStatus.RUNNING
            elif command == Command.TOGGLE_PAUSE:
                self.status = GameStatus.RUNNING

        elif self.status == GameStatus.RUNNING:
            if command in MOVES:
                self.heading.safe_change(MOVES[command])
            elif command == Command.TOGGLE_PAUSE:
                logger.debug("paused")
                self.status = GameStatus.PAUSED

        elif self.status == GameStatus.PAUSED:
            # Во время паузы стрелки не действуют
            if command == Command.TOGGLE_PAUSE:
                logger.debug("resumed")
                self.status = GameStatus.RUNNING

        elif self.status == GameStatus.OVER:
            if command == Command.RESTART:
                self.status = GameStatus.RESTART

    def update(self):
        """Один кадр"""
        if self.status == GameStatus.RESTART:
            self.restart()
            return

        if self.status != GameStatus.RUNNING:
            return

        self.frame += 1
        if self.frame >= self.frames_per_cell:
            self.frame = 0
            self.tick()

    def tick(self):
        """Сдвиг змейки на одну клетку"""
        self.snake.move(self.heading.current)
        self.ticks += 1

        if not self.snake.is_valid(self.rows, self.columns):
            logger.debug("hit something at %s", self.snake.head)
            self.game_over()
            return

        if self.snake.head != self.food.coordinate:
            return

        self.snake.grow()
        if self.score % SPEEDUP_EVERY == 0 and self.frames_per_cell > MIN_FRAMES_PER_CELL:
            self.frames_per_cell -= 1
            logger.info("speed up: %d frames per cell", self.frames_per_cell)

        try:
            self.food = place_food(self.rows, self.columns, self.snake, self.rng)
        except BoardFullError:
            self.won = True
            self.game_over()

    def game_over(self):
        self.status = GameStatus.OVER
        result = self.result
        logger.info("game over: score=%d length=%d ticks=%d won=%s",
                    result.score, result.length, result.ticks, result.won)

        if self.score_store is not None:
            self.high_scores = self.score_store.record(result)
