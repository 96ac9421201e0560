"""
Змейка: игра с клавиатуры.

Использование:
    python play.py                        # Поле 36x36, рекорды в scores.txt
    python play.py --rows 20 --columns 20 # Поле поменьше
    python play.py --db snake_scores.db   # Хранить историю партий в SQLite

Управление: стрелки/WASD, SPACE пауза, R рестарт, ESC выход.
"""
import sys
import argparse
import logging
import sqlite3

import pygame

import controls
from config import ROWS, COLUMNS, CELL_WIDTH, FPS, SCORES_FILE
from database import SnakeDatabase
from game import Game, GameStatus
from render import Renderer
from scores import ScoreFile

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Snake')
    parser.add_argument('--rows', type=int, default=ROWS, help='Клеток по горизонтали')
    parser.add_argument('--columns', type=int, default=COLUMNS, help='Клеток по вертикали')
    parser.add_argument('--cell', type=int, default=CELL_WIDTH, help='Размер клетки в пикселях')
    parser.add_argument('--fps', type=int, default=FPS, help='Кадров в секунду')
    parser.add_argument('--scores', default=SCORES_FILE, help='Файл рекордов')
    parser.add_argument('--db', default=None, help='SQLite база вместо файла рекордов')
    parser.add_argument('--seed', type=int, default=None, help='Seed для еды')
    parser.add_argument('-v', '--verbose', action='store_true', help='Подробный лог')
    return parser.parse_args(argv)


def create_store(args):
    if args.db:
        try:
            return SnakeDatabase(args.db, rows=args.rows, columns=args.columns)
        except sqlite3.Error as e:
            # Рекорды не повод не играть - откатываемся на файл
            logger.warning("Could not open database %s: %s, using %s", args.db, e, args.scores)
    return ScoreFile(args.scores)


def run(game, renderer, fps=FPS):
    """Основной цикл: ввод -> обновление -> отрисовка"""
    clock = pygame.time.Clock()
    games = 0

    while game.status != GameStatus.EXIT:
        for command in controls.poll():
            game.handle(command)

        was_over = game.status == GameStatus.OVER
        game.update()
        if game.status == GameStatus.OVER and not was_over:
            games += 1

        renderer.draw(game)
        clock.tick(fps)

    return games


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    store = create_store(args)
    game = Game(args.rows, args.columns, score_store=store, seed=args.seed)

    try:
        renderer = Renderer(args.rows, args.columns, args.cell)
    except pygame.error as e:
        # Без окна играть нельзя
        print(f"Could not initialize display: {e}", file=sys.stderr)
        store.close()
        sys.exit(1)

    try:
        games = run(game, renderer, args.fps)
    finally:
        renderer.close()
        store.close()

    best = game.high_scores[0] if game.high_scores else 0
    print(f"\nGames: {games}")
    print(f"Last score: {game.score}")
    print(f"Best: {best}")


if __name__ == "__main__":
    main()
