"""
Enemy waves: spawning, random-walk motion, targeting and kills.
NO UI DEPENDENCIES.
"""
import math
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .constants import GRID_SIZE


@dataclass
class Enemy:
    """A single enemy. Dead enemies stay in the wave with alive=False."""
    id: int
    x: float
    y: float
    alive: bool = True

    def distance_to(self, x: float, y: float) -> float:
        """Euclidean distance from this enemy to (x, y)."""
        return math.hypot(x - self.x, y - self.y)


def find_nearest_enemy(px: float, py: float, enemies: List[Enemy]) -> Optional[int]:
    """
    Find the closest living enemy to (px, py).

    Returns the index of that enemy in the list, or None if no enemy is alive.
    On an exact tie the lowest index wins.
    """
    nearest_index = None
    min_dist2 = math.inf

    for i, enemy in enumerate(enemies):
        if not enemy.alive:
            continue
        dx = px - enemy.x
        dy = py - enemy.y
        dist2 = dx * dx + dy * dy
        if dist2 < min_dist2:
            min_dist2 = dist2
            nearest_index = i

    return nearest_index


def move_enemies_randomly(
    enemies: List[Enemy],
    speed: float,
    rng: Optional[random.Random] = None,
    bounds: Optional[int] = None
) -> None:
    """
    Random-walk every living enemy by up to `speed` on each axis.

    If `bounds` is given, positions are clamped to [0, bounds - 1].
    """
    if speed <= 0:
        return
    rng = rng or random

    for enemy in enemies:
        if not enemy.alive:
            continue
        enemy.x += rng.uniform(-speed, speed)
        enemy.y += rng.uniform(-speed, speed)
        if bounds is not None:
            enemy.x = min(max(enemy.x, 0.0), float(bounds - 1))
            enemy.y = min(max(enemy.y, 0.0), float(bounds - 1))


def shoot_enemy(enemies: List[Enemy], index: int) -> None:
    """Mark the enemy at `index` as dead."""
    enemies[index].alive = False


class EnemyStore:
    """
    Holds the current wave of enemies.

    The wave is replaced wholesale by spawn(); enemies are never removed
    individually, only marked dead.

    Usage:
        store = EnemyStore(rng=random.Random(42))
        store.spawn(10)
        target = store.find_nearest(10.0, 10.0)
        if target is not None:
            store.shoot(target)
    """

    def __init__(self, grid_size: int = GRID_SIZE, rng: Optional[random.Random] = None):
        self.grid_size = grid_size
        self.rng = rng or random.Random()
        self.enemies: List[Enemy] = []

    def spawn(self, count: int) -> None:
        """Replace the current wave with `count` enemies on random cells."""
        self.enemies = [
            Enemy(
                id=i,
                x=float(self.rng.randint(0, self.grid_size - 1)),
                y=float(self.rng.randint(0, self.grid_size - 1)),
            )
            for i in range(count)
        ]

    def find_nearest(self, x: float, y: float) -> Optional[int]:
        return find_nearest_enemy(x, y, self.enemies)

    def move_randomly(self, speed: float, clamp: bool = False) -> None:
        bounds = self.grid_size if clamp else None
        move_enemies_randomly(self.enemies, speed, rng=self.rng, bounds=bounds)

    def shoot(self, index: int) -> None:
        shoot_enemy(self.enemies, index)

    def all_dead(self) -> bool:
        """True when no enemy in the wave is alive (also for an empty wave)."""
        return not any(e.alive for e in self.enemies)

    def alive_count(self) -> int:
        return sum(1 for e in self.enemies if e.alive)

    def iter_alive(self) -> Iterator[Enemy]:
        for enemy in self.enemies:
            if enemy.alive:
                yield enemy

    def __getitem__(self, index: int) -> Enemy:
        return self.enemies[index]

    def __len__(self) -> int:
        return len(self.enemies)

    def __iter__(self) -> Iterator[Enemy]:
        return iter(self.enemies)

    def __repr__(self) -> str:
        return f"EnemyStore({self.alive_count()}/{len(self.enemies)} alive)"
