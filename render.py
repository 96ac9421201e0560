"""
Отрисовка игры в окне pygame.
Рендерер только читает состояние игры, ничего в нём не меняя.
"""
import pygame

from config import (CELL_WIDTH, BACKGROUND, SNAKE, TEXT_COLOR, HINT_COLOR,
                    FONT_NAME, FONT_SIZE, SMALL_FONT_SIZE)
from game import GameStatus


class Renderer:
    def __init__(self, rows, columns, cell_width=CELL_WIDTH):
        pygame.init()
        self.rows = rows
        self.columns = columns
        self.cell_width = cell_width

        # Ось row идёт по горизонтали, column - по вертикали
        self.width = rows * cell_width
        self.height = columns * cell_width

        self.screen = pygame.display.set_mode((self.width + 1, self.height + 1))
        pygame.display.set_caption('Snake')
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.small_font = pygame.font.SysFont(FONT_NAME, SMALL_FONT_SIZE)

    def cell_rect(self, coordinate):
        row, column = coordinate
        return pygame.Rect(row * self.cell_width, column * self.cell_width,
                           self.cell_width, self.cell_width)

    def on_board(self, coordinate):
        return 0 <= coordinate.row < self.rows and 0 <= coordinate.column < self.columns

    def draw_cell(self, coordinate, color):
        pygame.draw.rect(self.screen, color, self.cell_rect(coordinate))

    def draw_text(self, text, x, y, font=None, color=TEXT_COLOR, center=False):
        surf = (font or self.font).render(text, True, color)
        rect = surf.get_rect()
        if center:
            rect.center = (x, y)
        else:
            rect.topleft = (x, y)
        self.screen.blit(surf, rect)

    def draw_snake(self, snake):
        # Голова за стеной при проигрыше не рисуется
        for segment in snake.path:
            if self.on_board(segment):
                self.draw_cell(segment, SNAKE)

    def draw_food(self, food):
        self.draw_cell(food.coordinate, food.color)

    def draw_messages(self, game):
        cx, cy = self.width // 2, self.height // 2

        self.draw_text(f"Score: {game.score}", 10, 10)

        if game.status == GameStatus.START:
            self.draw_text("Press an arrow key to start", cx, cy, center=True)
        elif game.status == GameStatus.PAUSED:
            self.draw_text("Paused", cx, cy, center=True)
            self.draw_text("SPACE to resume", cx, cy + 30,
                           font=self.small_font, color=HINT_COLOR, center=True)
        elif game.status == GameStatus.OVER:
            title = "You win!" if game.won else "Game over"
            self.draw_text(f"{title} Score: {game.score}", cx, cy - 40, center=True)
            self.draw_high_scores(game.high_scores, cx, cy)
            self.draw_text("R to restart, ESC to quit", cx, self.height - 30,
                           font=self.small_font, color=HINT_COLOR, center=True)

    def draw_high_scores(self, scores, x, y):
        if not scores:
            return
        self.draw_text("High scores", x, y, font=self.small_font, center=True)
        for i, score in enumerate(scores):
            self.draw_text(f"{i + 1}. {score}", x, y + 22 * (i + 1),
                           font=self.small_font, center=True)

    def draw(self, game):
        """Один кадр"""
        self.screen.fill(BACKGROUND)
        self.draw_snake(game.snake)
        self.draw_food(game.food)
        self.draw_messages(game)
        pygame.display.flip()

    def close(self):
        pygame.quit()
