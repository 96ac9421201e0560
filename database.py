"""
SQLite база данных для хранения истории партий.
Работает как таблица рекордов (read/record), но помнит каждую игру.
"""
import logging
import sqlite3

from config import DATABASE_FILE, MAX_HIGH_SCORES

logger = logging.getLogger(__name__)


class SnakeDatabase:
    def __init__(self, db_path=DATABASE_FILE, rows=None, columns=None):
        self.db_path = db_path
        self.rows = rows
        self.columns = columns
        self.conn = None
        self._init_db()

    def _init_db(self):
        """Инициализация базы данных"""
        self.conn = sqlite3.connect(self.db_path)
        cursor = self.conn.cursor()

        # Таблица партий
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS games (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                score INTEGER,
                length INTEGER,
                ticks INTEGER,
                won INTEGER,
                rows INTEGER,
                columns INTEGER,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')

        self.conn.commit()

    def save_game(self, score, length, ticks, won=False):
        """Сохранить результат партии"""
        cursor = self.conn.cursor()
        cursor.execute('''
            INSERT INTO games (score, length, ticks, won, rows, columns)
            VALUES (?, ?, ?, ?, ?, ?)
        ''', (score, length, ticks, int(won), self.rows, self.columns))
        self.conn.commit()
        return cursor.lastrowid

    def get_top_scores(self, limit=MAX_HIGH_SCORES):
        """Лучшие очки по убыванию"""
        cursor = self.conn.cursor()
        cursor.execute('''
            SELECT score FROM games
            ORDER BY score DESC, ticks ASC
            LIMIT ?
        ''', (limit,))
        return [row[0] for row in cursor.fetchall()]

    def get_stats(self):
        """Сколько сыграно, лучший и средний счёт, число побед"""
        cursor = self.conn.cursor()
        cursor.execute('''
            SELECT COUNT(*), MAX(score), AVG(score), SUM(won)
            FROM games
        ''')
        games, best, avg, wins = cursor.fetchone()
        return {
            'games': games,
            'best': best or 0,
            'avg': avg or 0.0,
            'wins': wins or 0,
        }

    def read(self):
        try:
            return self.get_top_scores()
        except sqlite3.Error as e:
            logger.warning("Could not read scores from %s: %s", self.db_path, e)
            return []

    def record(self, result):
        """Сохранить партию и вернуть обновлённую таблицу рекордов"""
        try:
            self.save_game(result.score, result.length, result.ticks, result.won)
        except sqlite3.Error as e:
            logger.warning("Could not save game to %s: %s", self.db_path, e)
        return self.read()

    def close(self):
        """Закрыть соединение"""
        if self.conn:
            self.conn.close()
