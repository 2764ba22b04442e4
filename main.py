"""
Entry point for the retro arcade.

Launches one of the four games in a pygame window:
  - snake:   steer the snake to the food without hitting walls or yourself.
  - shooter: shoot falling enemies before they reach you.
  - bounce:  keep the ball in play and clear the wall of bricks.
  - puzzle:  place falling blocks and clear full rows.

Usage:
    python main.py --game snake
    python main.py --game puzzle --config config/arcade.yaml
    python main.py --game bounce --scores ~/.arcade_scores.yaml --log-level DEBUG
"""

from __future__ import annotations

import argparse
import pathlib

import yaml

from arcade.scores import GameId, YamlScoreStore
from arcade.utils.logging import setup_logging


def load_config(config_path: str | pathlib.Path) -> dict:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dict of configuration key-value pairs.

    Raises:
        FileNotFoundError: If the config file does not exist.
    """
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Namespace with game, config, scores and log_level attributes.
    """
    parser = argparse.ArgumentParser(
        description="Retro arcade: snake, space shooter, bounce ball and block puzzle.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--game",
        type=str,
        choices=[game_id.value for game_id in GameId],
        default=GameId.SNAKE.value,
        help="Which game to play.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/arcade.yaml",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--scores",
        type=str,
        default=None,
        help="Path to the best-score file (default: scores_path from the config).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: log_level from the config, else INFO).",
    )
    return parser.parse_args()


def main() -> None:
    """Main entry point: parse args, load config, and launch the selected game."""
    args = parse_args()
    config = load_config(args.config)
    setup_logging(args.log_level or config.get("log_level", "INFO"))

    scores_path = args.scores or config.get("scores_path", "arcade_scores.yaml")
    store = YamlScoreStore(scores_path)

    from arcade.play import play_manual
    play_manual(GameId(args.game), config, store)


if __name__ == "__main__":
    main()
