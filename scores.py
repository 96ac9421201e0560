"""
Таблица рекордов в текстовом файле.

Формат: лучшие очки через запятую по убыванию, например "12,9,4".
Ошибки чтения и записи не мешают игре, только пишутся в лог.
"""
import logging
from pathlib import Path

from config import SCORES_FILE, MAX_HIGH_SCORES

logger = logging.getLogger(__name__)


def top_scores(scores, limit=MAX_HIGH_SCORES):
    """Лучшие limit очков по убыванию"""
    return sorted(scores, reverse=True)[:limit]


class ScoreFile:
    def __init__(self, path=SCORES_FILE, limit=MAX_HIGH_SCORES):
        self.path = Path(path)
        self.limit = limit

    def read(self):
        """Прочитать рекорды. Нет файла или он битый - пустой список."""
        try:
            text = self.path.read_text().strip()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read scores from %s: %s", self.path, e)
            return []

        if not text:
            return []

        try:
            scores = [int(value) for value in text.split(',')]
        except ValueError:
            logger.warning("Ignoring malformed scores file %s", self.path)
            return []

        return top_scores(scores, self.limit)

    def write(self, scores):
        scores = top_scores(scores, self.limit)
        try:
            self.path.write_text(','.join(str(score) for score in scores))
        except OSError as e:
            logger.warning("Could not save scores to %s: %s", self.path, e)
        return scores

    def record(self, result):
        """Добавить результат партии и вернуть обновлённую таблицу"""
        return self.write(self.read() + [result.score])

    def close(self):
        pass
