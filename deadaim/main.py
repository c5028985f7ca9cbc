#!/usr/bin/env python3
"""
DeadAim - Main Entry Point

A terminal grid-shooter. Enemies wander a 20x20 grid; shoot the nearest
one before it reaches you. Clear a wave to start a bigger one.

Usage:
    deadaim
    python -m deadaim.main

Controls:
    W/A/D: Move up, left, right
    S: Shoot the nearest enemy (also moves down)
    Q: End the session

Settings are read from DEADAIM_* environment variables (see deadaim.config).
"""
import logging
import sys
import time
from typing import Optional

from blessed import Terminal

from deadaim.config import Settings, configure_logging, get_settings
from deadaim.gameplay.game import Game, GameOverEvent
from deadaim.gameplay.highscore import HighScoreStore
from deadaim.ui.input_handler import InputHandler, MENU_START, MENU_HIGH_SCORE, MENU_QUIT
from deadaim.ui.renderer import Renderer

logger = logging.getLogger(__name__)


class DeadAimApp:
    """
    Menu loop (idle state) that runs one session at a time.
    """

    def __init__(self, settings: Settings, term: Optional[Terminal] = None):
        self.settings = settings
        self.term = term or Terminal()
        self.renderer = Renderer(self.term)
        self.input = InputHandler(self.term)
        self.high_scores = HighScoreStore(settings.high_score_file)

    def run(self) -> int:
        """Show the menu until the player quits. Returns the exit code."""
        while True:
            self.renderer.show(self.renderer.menu())
            choice = self.input.read_menu_choice()

            if choice == MENU_START:
                self.play_session()
            elif choice == MENU_HIGH_SCORE:
                self.show_high_score()
            elif choice == MENU_QUIT:
                self.renderer.show(self.renderer.goodbye())
                return 0
            else:
                self.renderer.show(self.renderer.invalid_choice())
                time.sleep(self.settings.menu_retry_delay_ms / 1000)

    def show_high_score(self) -> None:
        self.renderer.show(self.renderer.high_score(self.high_scores.load()))
        self.renderer.show(self.renderer.press_any_key())
        self.input.wait_for_key()

    def play_session(self) -> None:
        """Run one session from the first frame to the game-over screen."""
        game = Game(self.settings, high_scores=self.high_scores)
        game_over = None

        while game.is_running:
            self.renderer.show(self.renderer.frame(game))
            command = self.input.read_command()
            events = game.tick(command)
            self.renderer.show(self.renderer.events(events))

            for event in events:
                if isinstance(event, GameOverEvent):
                    game_over = event

            if game.is_running:
                time.sleep(self.settings.tick_delay_ms / 1000)

        self.renderer.show(self.renderer.game_over(game_over))
        self.input.wait_for_key()


def main() -> int:
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings)
    logger.info("DeadAim starting")

    app = DeadAimApp(settings)
    try:
        return app.run()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
