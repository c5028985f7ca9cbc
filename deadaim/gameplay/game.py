"""
Main Game class - one DeadAim session, advanced one command at a time.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without a terminal.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

from deadaim.config import Settings, get_settings

from .constants import (
    KILL_SCORE, ENEMIES_PER_LEVEL, ENEMY_BASE_SPEED, ENEMY_SPEED_PER_LEVEL,
    STARTING_LEVEL
)
from .enemies import EnemyStore
from .highscore import HighScoreStore

logger = logging.getLogger(__name__)


class Command(Enum):
    """A single in-session command, one per tick."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SHOOT = auto()   # Same key as DOWN, so it also moves the player down
    QUIT = auto()
    WAIT = auto()    # Unmapped key: the tick still runs

    def delta(self) -> Tuple[int, int]:
        """Return (dx, dy) of the player move for this command."""
        deltas = {
            Command.UP: (0, -1),
            Command.DOWN: (0, 1),
            Command.LEFT: (-1, 0),
            Command.RIGHT: (1, 0),
            Command.SHOOT: (0, 1),
        }
        return deltas.get(self, (0, 0))


class GamePhase(Enum):
    """Current phase of a session."""
    RUNNING = auto()    # Accepting commands
    GAME_OVER = auto()  # Health ran out or the player quit


@dataclass
class PlayerState:
    """Everything the loop tracks about the player."""
    x: float
    y: float
    health: int
    score: int = 0
    level: int = STARTING_LEVEL
    multiplier: int = 1

    @property
    def is_alive(self) -> bool:
        return self.health > 0


@dataclass
class GameEvent:
    """An event that occurred during a tick (for UI to react to)."""
    pass


@dataclass
class EnemyShotEvent(GameEvent):
    """The player killed an enemy."""
    enemy_id: int
    points: int


@dataclass
class PlayerHitEvent(GameEvent):
    """An enemy reached the player."""
    enemy_id: int
    new_health: int


@dataclass
class LevelUpEvent(GameEvent):
    """The wave was cleared and a bigger one spawned."""
    level: int
    enemy_count: int


@dataclass
class PhaseChangedEvent(GameEvent):
    """Session phase changed."""
    old_phase: GamePhase
    new_phase: GamePhase


@dataclass
class GameOverEvent(GameEvent):
    """The session ended."""
    final_score: int
    high_score: int
    new_high_score: bool


class Game:
    """
    One game session.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as plain data and accepts commands through tick().

    Usage:
        game = Game()
        while game.is_running:
            events = game.tick(command)
            # UI reads game state and renders
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        high_scores: Optional[HighScoreStore] = None,
        rng: Optional[random.Random] = None
    ):
        self.settings = settings or get_settings()
        self.high_scores = high_scores or HighScoreStore(self.settings.high_score_file)
        self.grid_size = self.settings.grid_size

        center = float(self.grid_size // 2)
        self.player = PlayerState(x=center, y=center, health=self.settings.starting_health)

        self.enemies = EnemyStore(
            self.grid_size,
            rng=rng or random.Random(self.settings.seed)
        )
        self.enemies.spawn(self.settings.base_enemy_count)

        self.high_score = self.high_scores.load()
        self.phase = GamePhase.RUNNING
        self.ticks = 0

        # Event queue for UI notifications
        self._events: List[GameEvent] = []

        logger.info(
            f"Session started: {len(self.enemies)} enemies, high score {self.high_score}"
        )

    # =========================================================================
    # DERIVED VALUES
    # =========================================================================

    @property
    def is_running(self) -> bool:
        return self.phase == GamePhase.RUNNING

    @property
    def enemy_speed(self) -> float:
        """Random-walk step for the current level."""
        return ENEMY_BASE_SPEED + ENEMY_SPEED_PER_LEVEL * self.player.level

    def wave_size(self, level: int) -> int:
        """Number of enemies spawned when `level` starts."""
        return self.settings.base_enemy_count + level * ENEMIES_PER_LEVEL

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def tick(self, command: Command) -> List[GameEvent]:
        """
        Run one tick for a consumed command.
        Returns list of events that occurred.
        """
        self._events = []

        if self.phase != GamePhase.RUNNING:
            return self._events

        if command == Command.QUIT:
            logger.info("Player quit the session")
            self._end_session()
            return self._events

        self._move_player(command)
        self.enemies.move_randomly(self.enemy_speed, clamp=self.settings.clamp_enemies)
        self._resolve_combat(command)
        self._check_wave_cleared()

        self.ticks += 1

        if not self.player.is_alive:
            self._end_session()

        return self._events

    def _move_player(self, command: Command) -> None:
        """Move the player, dropping moves that would leave the grid."""
        dx, dy = command.delta()
        if dx == 0 and dy == 0:
            return

        speed = self.settings.player_speed
        new_x = self.player.x + dx * speed
        new_y = self.player.y + dy * speed
        limit = self.grid_size - 1

        if 0 <= new_x <= limit and 0 <= new_y <= limit:
            self.player.x = new_x
            self.player.y = new_y

    def _resolve_combat(self, command: Command) -> None:
        """Shoot the nearest enemy, or let it hit the player if it is adjacent."""
        nearest = self.enemies.find_nearest(self.player.x, self.player.y)
        if nearest is None:
            return

        enemy = self.enemies[nearest]
        dist = enemy.distance_to(self.player.x, self.player.y)

        if command == Command.SHOOT and dist <= self.settings.shoot_range:
            self.enemies.shoot(nearest)
            points = KILL_SCORE * self.player.multiplier
            self.player.score += points
            self.player.multiplier += 1
            self._events.append(EnemyShotEvent(enemy.id, points))

        elif dist <= self.settings.hit_radius:
            self.enemies.shoot(nearest)
            self.player.health = max(0, self.player.health - 1)
            self.player.multiplier = 1
            logger.debug(f"Enemy {enemy.id} hit the player, health {self.player.health}")
            self._events.append(PlayerHitEvent(enemy.id, self.player.health))

    def _check_wave_cleared(self) -> None:
        """Start the next level once every enemy in the wave is dead."""
        if not self.enemies.all_dead():
            return

        self.player.level += 1
        count = self.wave_size(self.player.level)
        self.enemies.spawn(count)
        logger.info(f"Level {self.player.level} starts with {count} enemies")
        self._events.append(LevelUpEvent(self.player.level, count))

    def _end_session(self) -> None:
        """Game over: record the high score. Runs once per session."""
        if self.phase == GamePhase.GAME_OVER:
            return

        old_phase = self.phase
        self.phase = GamePhase.GAME_OVER
        self._events.append(PhaseChangedEvent(old_phase, self.phase))

        score = self.player.score
        best = self.high_scores.submit(score, self.high_score)
        new_high_score = best > self.high_score
        self.high_score = best

        logger.info(f"Session over after {self.ticks} ticks: score {score}")
        self._events.append(GameOverEvent(score, self.high_score, new_high_score))

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def play(self, commands: Iterable[Command]) -> List[GameEvent]:
        """
        Feed commands until they run out or the session ends.
        Returns all events that occurred.
        """
        all_events = []
        for command in commands:
            if not self.is_running:
                break
            all_events.extend(self.tick(command))
        return all_events
