"""
Tests for the menu loop. Key reads are scripted; the terminal does no styling.
"""
import pytest
from blessed import Terminal

from deadaim.config import Settings
from deadaim.gameplay.game import Command
from deadaim.gameplay.highscore import HighScoreStore
from deadaim.main import DeadAimApp


class ScriptedInput:
    """Stands in for InputHandler, replaying queued keys and commands."""

    def __init__(self, keys, commands=()):
        self.keys = list(keys)
        self.commands = list(commands)
        self.waits = 0

    def read_menu_choice(self) -> str:
        return self.keys.pop(0)

    def read_command(self) -> Command:
        return self.commands.pop(0) if self.commands else Command.QUIT

    def wait_for_key(self) -> None:
        self.waits += 1


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr("deadaim.main.time.sleep", calls.append)
    return calls


@pytest.fixture
def make_app(tmp_path):
    def _make(keys, commands=(), **overrides):
        settings = Settings(
            _env_file=None,
            high_score_file=str(tmp_path / "highscore.txt"),
            seed=99,
            **overrides,
        )
        app = DeadAimApp(settings, term=Terminal(force_styling=None))
        app.input = ScriptedInput(keys, commands)
        return app
    return _make


class TestMenu:
    """Tests for DeadAimApp.run."""

    def test_full_menu_tour(self, make_app, sleeps, capsys):
        """Invalid key, view score, play, quit: exit code 0."""
        app = make_app(["x", "2", "1", "3"], menu_retry_delay_ms=0)

        assert app.run() == 0

        out = capsys.readouterr().out
        assert out.count("Invalid choice! Try again.") == 1
        assert "Current High Score: 0" in out
        assert "Game Over! Final Score: 0" in out
        assert out.endswith("Thanks for playing DeadAim!\n")
        assert app.input.keys == []
        # One pause after viewing the score, one after game over
        assert app.input.waits == 2

    def test_invalid_choice_waits_before_reprompt(self, make_app, sleeps, capsys):
        app = make_app(["9", "3"])

        assert app.run() == 0

        assert sleeps == [0.5]
        assert capsys.readouterr().out.count("Enter your choice: ") == 2

    def test_quit_immediately(self, make_app, sleeps, capsys):
        app = make_app(["3"])
        assert app.run() == 0
        assert sleeps == []
        assert "Game Over" not in capsys.readouterr().out

    def test_view_stored_high_score(self, make_app, sleeps, capsys, tmp_path):
        HighScoreStore(tmp_path / "highscore.txt").save(77)
        app = make_app(["2", "3"])

        app.run()

        assert "Current High Score: 77" in capsys.readouterr().out

    def test_session_paces_ticks(self, make_app, sleeps, capsys):
        """Each tick that leaves the session running is followed by the tick delay."""
        app = make_app(["1", "3"], commands=[Command.WAIT, Command.UP], tick_delay_ms=150)

        app.run()

        assert sleeps == [0.15, 0.15]
        out = capsys.readouterr().out
        assert out.count("Move: W/A/S/D, Shoot: s, Quit: q >> ") == 3
        assert "Game Over! Final Score: 0" in out
