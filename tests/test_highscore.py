"""
Tests for high score persistence.
"""
import pytest
from deadaim.gameplay.highscore import HighScoreStore


class TestHighScoreStore:
    """Tests for HighScoreStore."""

    def test_missing_file_is_zero(self, tmp_path):
        store = HighScoreStore(tmp_path / "nope.txt")
        assert store.load() == 0

    def test_save_then_load(self, tmp_path):
        store = HighScoreStore(tmp_path / "hs.txt")
        assert store.save(1234)
        assert store.load() == 1234
        assert (tmp_path / "hs.txt").read_text() == "1234"

    def test_save_overwrites(self, tmp_path):
        store = HighScoreStore(tmp_path / "hs.txt")
        store.save(500)
        store.save(70)
        assert store.load() == 70

    @pytest.mark.parametrize("content", ["", "   \n", "abc", "12abc", "1.5"])
    def test_corrupt_file_is_zero(self, tmp_path, content):
        path = tmp_path / "hs.txt"
        path.write_text(content)
        assert HighScoreStore(path).load() == 0

    def test_negative_is_zero(self, tmp_path):
        path = tmp_path / "hs.txt"
        path.write_text("-40")
        assert HighScoreStore(path).load() == 0

    def test_surrounding_whitespace_ok(self, tmp_path):
        path = tmp_path / "hs.txt"
        path.write_text("  250\n")
        assert HighScoreStore(path).load() == 250

    def test_unreadable_path_is_zero(self, tmp_path):
        """A directory where the file should be reads as no high score."""
        assert HighScoreStore(tmp_path).load() == 0

    def test_failed_save_returns_false(self, tmp_path):
        store = HighScoreStore(tmp_path / "missing_dir" / "hs.txt")
        assert store.save(10) is False
        assert store.load() == 0


class TestSubmit:
    """Tests for keeping the best score: stored value becomes max(S, H)."""

    @pytest.mark.parametrize("previous, score, expected", [
        (0, 0, 0),
        (0, 30, 30),
        (100, 30, 100),
        (100, 100, 100),
        (100, 101, 101),
    ])
    def test_submit_keeps_max(self, tmp_path, previous, score, expected):
        store = HighScoreStore(tmp_path / "hs.txt")
        if previous:
            store.save(previous)

        best = store.submit(score, store.load())

        assert best == expected
        assert store.load() == expected

    def test_failed_write_still_reports_best(self, tmp_path):
        """A score that cannot be written is still the session's best."""
        store = HighScoreStore(tmp_path / "missing_dir" / "hs.txt")
        assert store.submit(80, 50) == 80
        assert store.load() == 0
