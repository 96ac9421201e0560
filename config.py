# Настройки игры
# Поле 36x36 клеток по 20 пикселей (холст 720x720)
WIDTH = 720
HEIGHT = 720

# Сетка
CELL_WIDTH = 20
COLUMNS = WIDTH // CELL_WIDTH  # 36 клеток
ROWS = HEIGHT // CELL_WIDTH    # 36 клеток

# Цвета
DARK_RED = (35, 15, 13)
PINK = (200, 0, 100)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GRAY = (150, 150, 150)

SNAKE = PINK
FOOD = WHITE
BACKGROUND = DARK_RED
TEXT_COLOR = RED
HINT_COLOR = GRAY

# Шрифт
FONT_NAME = 'arial'
FONT_SIZE = 24
SMALL_FONT_SIZE = 18

# Змейка
INITIAL_SNAKE_LENGTH = 4
SNAKE_START = (8, 8)

# Скорость: 60 кадров в секунду, змейка проходит клетку за несколько кадров
FPS = 60
INITIAL_FRAMES_PER_CELL = 5   # ~80 мс на клетку
MIN_FRAMES_PER_CELL = 2
SPEEDUP_EVERY = 10            # ускоряемся каждые 10 очков

# Еда: при заполнении поля больше чем наполовину выбираем из свободных клеток
FREE_CELL_THRESHOLD = 0.5

# Рекорды
SCORES_FILE = 'scores.txt'
MAX_HIGH_SCORES = 10
DATABASE_FILE = 'snake_scores.db'
