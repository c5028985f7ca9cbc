"""
High score persistence - a single integer in a plain-text file.
NO UI DEPENDENCIES.
"""
import logging
from pathlib import Path
from typing import Union

from .constants import HIGH_SCORE_FILE

logger = logging.getLogger(__name__)


class HighScoreStore:
    """
    Reads and writes the high score file.

    A missing, empty or corrupt file counts as a high score of 0.
    """

    def __init__(self, path: Union[str, Path] = HIGH_SCORE_FILE):
        self.path = Path(path).expanduser()

    def load(self) -> int:
        """Return the stored high score, or 0 if there is none."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0
        except OSError as exc:
            logger.warning(f"Could not read high score file {self.path}: {exc}")
            return 0

        try:
            score = int(text.split()[0]) if text.strip() else 0
        except ValueError:
            logger.warning(f"Ignoring corrupt high score file {self.path}")
            return 0

        return max(score, 0)

    def save(self, score: int) -> bool:
        """
        Overwrite the stored high score.
        Returns False if the file could not be written.
        """
        try:
            self.path.write_text(str(score), encoding="utf-8")
        except OSError as exc:
            logger.error(f"Could not write high score file {self.path}: {exc}")
            return False

        logger.info(f"Saved high score {score} to {self.path}")
        return True

    def submit(self, score: int, previous: int) -> int:
        """
        Persist `score` if it strictly beats `previous`.
        Returns the high score after submission, max(score, previous).
        """
        if score <= previous:
            return previous
        self.save(score)
        return score

    def __repr__(self) -> str:
        return f"HighScoreStore({str(self.path)!r})"
