"""
Pytest fixtures for DeadAim tests.
"""
import random

import pytest

from deadaim.config import Settings
from deadaim.gameplay.game import Game
from deadaim.gameplay.highscore import HighScoreStore


class StillRandom(random.Random):
    """A Random whose uniform() always returns 0, so enemies never wander."""

    def uniform(self, a, b):
        return 0.0


class RecordingHighScoreStore(HighScoreStore):
    """High score store that counts saves."""

    def __init__(self, path, initial: int = 0):
        super().__init__(path)
        self.saves = []
        if initial:
            self.path.write_text(str(initial), encoding="utf-8")

    def save(self, score: int) -> bool:
        self.saves.append(score)
        return super().save(score)


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Default settings with the high score file in a temp dir."""
    return Settings(
        _env_file=None,
        high_score_file=str(tmp_path / "highscore.txt"),
        seed=1234,
    )


@pytest.fixture
def high_scores(settings) -> RecordingHighScoreStore:
    return RecordingHighScoreStore(settings.high_score_file)


@pytest.fixture
def still_game(settings, high_scores) -> Game:
    """A game whose enemies never move on their own."""
    return Game(settings, high_scores=high_scores, rng=StillRandom(7))


@pytest.fixture
def still_rng() -> StillRandom:
    return StillRandom(7)


@pytest.fixture
def stored_100(settings) -> RecordingHighScoreStore:
    """High score store that already holds 100."""
    return RecordingHighScoreStore(settings.high_score_file, initial=100)
