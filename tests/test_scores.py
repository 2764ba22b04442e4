"""Tests for best-score persistence."""

import logging

import pytest

from arcade.game.snake import GRID_SIZE, SnakeGame
from arcade.scores import BestScore, GameId, MemoryScoreStore, YamlScoreStore


class FailingStore:
    """Store whose reads and writes always fail."""

    def __init__(self):
        self.put_calls = 0

    def get(self, game_id):
        raise OSError("disk unavailable")

    def put(self, game_id, score):
        self.put_calls += 1
        raise OSError("disk unavailable")


def test_ratchet_keeps_the_higher_score():
    scores = BestScore(GameId.SNAKE, MemoryScoreStore())
    assert scores.save_best(5) is True
    assert scores.save_best(3) is False
    assert scores.best == 5


def test_ratchet_accepts_a_new_high():
    store = MemoryScoreStore()
    scores = BestScore(GameId.SNAKE, store)
    scores.save_best(5)
    scores.save_best(9)
    assert scores.best == 9
    assert store.get(GameId.SNAKE) == 9


def test_equal_score_is_not_written():
    store = MemoryScoreStore({GameId.BOUNCE: 50})
    scores = BestScore(GameId.BOUNCE, store)
    assert scores.load_best() == 50
    assert scores.save_best(50) is False


def test_load_best_defaults_to_zero():
    assert BestScore(GameId.PUZZLE, MemoryScoreStore()).load_best() == 0


def test_unreadable_store_loads_zero_and_logs(caplog):
    scores = BestScore(GameId.SHOOTER, FailingStore())
    with caplog.at_level(logging.WARNING, logger="arcade.scores"):
        assert scores.load_best() == 0
    assert "Could not load best score for shooter" in caplog.text


def test_failed_write_keeps_in_memory_best_and_logs(caplog):
    store = FailingStore()
    scores = BestScore(GameId.SHOOTER, store)
    with caplog.at_level(logging.WARNING, logger="arcade.scores"):
        assert scores.save_best(400) is True
    assert scores.best == 400
    assert store.put_calls == 1
    assert "Could not save best score for shooter" in caplog.text


def test_game_over_with_failing_store_does_not_raise():
    game = SnakeGame(store=FailingStore())
    game.toggle_play()
    game.score = 30
    game.snake = [(GRID_SIZE - 1, 0)]
    game.step()
    assert game.best_score == 30


def test_yaml_store_missing_file_reads_zero(tmp_path):
    store = YamlScoreStore(tmp_path / "scores.yaml")
    assert store.get(GameId.SNAKE) == 0


def test_yaml_store_keeps_one_key_per_game(tmp_path):
    path = tmp_path / "nested" / "scores.yaml"
    store = YamlScoreStore(path)
    store.put(GameId.SNAKE, 120)
    store.put(GameId.PUZZLE, 800)

    reopened = YamlScoreStore(path)
    assert reopened.get(GameId.SNAKE) == 120
    assert reopened.get(GameId.PUZZLE) == 800
    assert reopened.get(GameId.BOUNCE) == 0
    assert "best_score_snake: 120" in path.read_text()


def test_yaml_store_rejects_non_mapping(tmp_path):
    path = tmp_path / "scores.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        YamlScoreStore(path).get(GameId.SNAKE)


def test_corrupt_file_degrades_to_zero(tmp_path):
    path = tmp_path / "scores.yaml"
    path.write_text("best_score_snake: [unterminated\n")
    scores = BestScore(GameId.SNAKE, YamlScoreStore(path))
    assert scores.load_best() == 0


def test_game_reads_best_score_on_construction():
    store = MemoryScoreStore({GameId.SNAKE: 90})
    assert SnakeGame(store=store).best_score == 90
