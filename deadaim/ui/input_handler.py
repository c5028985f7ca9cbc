"""
Input Handler - Translates key presses to gameplay commands.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Optional

from blessed import Terminal

from deadaim.gameplay.game import Command


# 's' both shoots and moves down; there is no separate down key
KEY_COMMANDS = {
    'w': Command.UP,
    'a': Command.LEFT,
    's': Command.SHOOT,
    'd': Command.RIGHT,
    'q': Command.QUIT,
}

MENU_START = '1'
MENU_HIGH_SCORE = '2'
MENU_QUIT = '3'


def command_for_key(key: str) -> Command:
    """
    Map a key to a command.
    Keys without a mapping still consume a tick, as WAIT.
    """
    return KEY_COMMANDS.get(str(key).lower(), Command.WAIT)


class InputHandler:
    """
    Blocking single-key reads from the terminal.
    """

    def __init__(self, term: Terminal):
        self.term = term

    def read_key(self, timeout: Optional[float] = None) -> str:
        """Block until a key is pressed and return it (empty on timeout)."""
        with self.term.cbreak():
            key = self.term.inkey(timeout=timeout)
        return str(key)

    def read_command(self) -> Command:
        return command_for_key(self.read_key())

    def read_menu_choice(self) -> str:
        key = self.read_key()
        print(key, flush=True)
        return key

    def wait_for_key(self) -> None:
        self.read_key()
