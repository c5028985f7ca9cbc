"""
Renderer - Reads gameplay state and builds terminal frames with blessed.
This is a THIN ADAPTER - no game logic here.
"""
from typing import List

from blessed import Terminal

from deadaim.gameplay.game import (
    Game, GameEvent, EnemyShotEvent, PlayerHitEvent, LevelUpEvent, GameOverEvent
)


TITLE = "DeadAim"

# Cell characters
PLAYER_CHAR = 'P'
ENEMY_CHAR = 'E'
EMPTY_CHAR = '.'

MENU_CHOICES = [
    "1. Start Game",
    "2. View High Score",
    "3. Quit",
]

PROMPT = "Move: W/A/S/D, Shoot: s, Quit: q >> "


class Renderer:
    """
    Renders game state as strings for a blessed Terminal.

    This class reads from Game but never modifies it. Every method returns
    text; only show() writes to the terminal.
    """

    def __init__(self, term: Terminal):
        self.term = term

    def show(self, text: str) -> None:
        print(text, end="", flush=True)

    def clear(self) -> str:
        return self.term.home + self.term.clear

    # =========================================================================
    # MENU
    # =========================================================================

    def menu(self) -> str:
        t = self.term
        lines = [t.magenta(f"================ {TITLE} ================")]
        lines.extend(t.cyan(choice) for choice in MENU_CHOICES)
        lines.append("Enter your choice: ")
        return self.clear() + "\n".join(lines)

    def high_score(self, score: int) -> str:
        return self.term.green(f"Current High Score: {score}") + "\n"

    def invalid_choice(self) -> str:
        return "Invalid choice! Try again.\n"

    def goodbye(self) -> str:
        return f"Thanks for playing {TITLE}!\n"

    def press_any_key(self) -> str:
        return "Press any key to return to menu..."

    # =========================================================================
    # SESSION
    # =========================================================================

    def hud(self, game: Game) -> str:
        p = game.player
        return self.term.cyan(
            f"Level: {p.level}  Health: {p.health}  Score: {p.score}"
            f"  Multiplier: x{p.multiplier}  High Score: {game.high_score}"
        )

    def grid_rows(self, game: Game) -> List[str]:
        """Draw the grid, one string per row. Positions are truncated to cells."""
        t = self.term
        size = game.grid_size
        px, py = int(game.player.x), int(game.player.y)
        occupied = {(int(e.x), int(e.y)) for e in game.enemies.iter_alive()}

        rows = []
        for y in range(size):
            row = []
            for x in range(size):
                if (x, y) == (px, py):
                    row.append(t.green(PLAYER_CHAR))
                elif (x, y) in occupied:
                    row.append(t.red(ENEMY_CHAR))
                else:
                    row.append(t.yellow(EMPTY_CHAR))
            rows.append("".join(row))
        return rows

    def frame(self, game: Game) -> str:
        """Full screen for one tick: HUD, grid and prompt."""
        lines = [self.hud(game)]
        lines.extend(self.grid_rows(game))
        lines.append(PROMPT)
        return self.clear() + "\n".join(lines)

    def event_message(self, event: GameEvent) -> str:
        """Feedback line for a gameplay event, or '' for silent events."""
        t = self.term
        if isinstance(event, EnemyShotEvent):
            return t.green(f"Shot enemy id: {event.enemy_id}!")
        elif isinstance(event, PlayerHitEvent):
            return t.red(f"Enemy {event.enemy_id} hit you! Health -1")
        elif isinstance(event, LevelUpEvent):
            return t.yellow(f"Level {event.level} starts with {event.enemy_count} enemies!")
        return ""

    def events(self, events: List[GameEvent]) -> str:
        messages = [self.event_message(e) for e in events]
        return "".join(f"\n{m}" for m in messages if m)

    def game_over(self, event: GameOverEvent) -> str:
        t = self.term
        lines = [t.red(f"\nGame Over! Final Score: {event.final_score}")]
        if event.new_high_score:
            lines.append(t.green(f"New High Score: {event.high_score}!"))
        else:
            lines.append(t.cyan(f"High Score remains: {event.high_score}"))
        lines.append(self.press_any_key())
        return "\n".join(lines)
