"""Timing and scoring of the fruit-cutting game, independent of any display."""

from __future__ import annotations

import heapq
import itertools
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from .storage import Coordinate

DEFAULT_HEIGHT = 800
FRUIT_WIDTH = 100
FRUIT_HEIGHT = 50
COUNTDOWN_START = 33
SPAWN_INTERVAL_MS = 1000
COUNTDOWN_INTERVAL_MS = 1000
BANANA_INTERVAL_MS = 5000
BANANA_X_LIMIT = 1350
BANANA_START_Y = 100
REMOVE_DELAY_MS = 3000


class FruitKind(Enum):
    """The two kinds of falling fruit."""

    WATERMELON = "watermelon"
    BANANA = "banana"

    @property
    def fall_step(self) -> int:
        """Pixels moved down on each fall tick."""
        return 15 if self is FruitKind.WATERMELON else 22

    @property
    def fall_interval_ms(self) -> int:
        """Milliseconds between fall ticks."""
        return 100 if self is FruitKind.WATERMELON else 50

    @property
    def points(self) -> int:
        """Points awarded for each click."""
        return 1 if self is FruitKind.WATERMELON else 2


@dataclass(eq=False)
class Fruit:
    """A fruit on screen; ``x`` and ``y`` are its top-left corner."""

    kind: FruitKind
    x: int
    y: int
    hit: bool = False
    moving: bool = True
    alive: bool = True


@dataclass(frozen=True)
class GameResult:
    """Final tally of a game."""

    cut: int
    missed: int
    high_score: int
    new_record: bool

    def message(self) -> tuple[str, str]:
        """Return the title and text of the end-of-game message."""
        if self.new_record:
            return (
                "Tebrikler!",
                f"Süre doldu!\nYeni en yüksek skor: {self.high_score}\n"
                f"Kesilen karpuz sayısı: {self.cut}\n"
                f"Kaçırılan karpuz sayısı: {self.missed}",
            )
        return (
            "Süre Bitti",
            f"Süre doldu!\nKesilen karpuz sayısı: {self.cut}\n"
            f"Kaçırılan karpuz sayısı: {self.missed}\n"
            f"En yüksek skor: {self.high_score}",
        )


class Game:
    """A running game driven by simulated time in milliseconds."""

    def __init__(
        self,
        coordinates: Iterable[Optional[Coordinate]] = (),
        high_score: int = 0,
        height: int = DEFAULT_HEIGHT,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.height = height
        self.high_score = high_score
        self.rng = rng if rng is not None else random.Random()
        self.pending: deque[Optional[Coordinate]] = deque(coordinates)
        self.fruits: list[Fruit] = []
        self.cut = 0
        self.missed = 0
        self.remaining = COUNTDOWN_START
        self.elapsed = 0
        self.result: Optional[GameResult] = None
        self._queue: list[tuple[int, int, Callable[[], None]]] = []
        self._order = itertools.count()
        self._repeat(SPAWN_INTERVAL_MS, self._spawn_next)
        self._repeat(COUNTDOWN_INTERVAL_MS, self._count_down)
        self._repeat(BANANA_INTERVAL_MS, self.spawn_banana)

    @property
    def finished(self) -> bool:
        return self.result is not None

    def _at(self, delay: int, action: Callable[[], None]) -> None:
        heapq.heappush(self._queue, (self.elapsed + delay, next(self._order), action))

    def _repeat(
        self,
        period: int,
        action: Callable[[], object],
        active: Callable[[], bool] = lambda: True,
    ) -> None:
        def tick() -> None:
            if not active():
                return
            action()
            if active():
                self._at(period, tick)

        self._at(period, tick)

    def advance(self, ms: int) -> Optional[GameResult]:
        """Let ``ms`` milliseconds pass; return the result once the game is over."""
        if ms < 0:
            raise ValueError("time cannot run backwards")
        target = self.elapsed + ms
        while self._queue and self._queue[0][0] <= target and not self.finished:
            when, _, action = heapq.heappop(self._queue)
            self.elapsed = when
            action()
        if not self.finished:
            self.elapsed = target
        return self.result

    def _spawn_next(self) -> None:
        if self.pending:
            coordinate = self.pending.popleft()
            if coordinate is not None:
                self.spawn_watermelon(*coordinate)

    def _count_down(self) -> None:
        self.remaining -= 1
        if self.remaining == 0:
            self.finish()

    def _add(self, fruit: Fruit) -> Fruit:
        self.fruits.append(fruit)
        self._repeat(
            fruit.kind.fall_interval_ms,
            lambda: self._fall(fruit),
            lambda: fruit.alive and fruit.moving,
        )
        return fruit

    def _fall(self, fruit: Fruit) -> None:
        fruit.y += fruit.kind.fall_step
        if fruit.y > self.height:
            self._remove(fruit)
            if fruit.kind is FruitKind.WATERMELON:
                self.missed += 1

    def _remove(self, fruit: Fruit) -> None:
        if fruit.alive:
            fruit.alive = False
            self.fruits.remove(fruit)

    def spawn_watermelon(self, x: int, y: int) -> Fruit:
        """Drop a watermelon from the given position."""
        return self._add(Fruit(FruitKind.WATERMELON, x, y))

    def spawn_banana(self) -> Fruit:
        """Drop a banana from a random horizontal position."""
        x = self.rng.randrange(0, BANANA_X_LIMIT)
        return self._add(Fruit(FruitKind.BANANA, x, BANANA_START_Y))

    def click(self, fruit: Fruit) -> int:
        """Cut a fruit and return the new cut count.

        A watermelon stops falling; both kinds vanish three seconds later
        and score again on every click until then.
        """
        if self.finished:
            raise RuntimeError("the game is over")
        if not fruit.alive:
            raise ValueError("fruit is no longer on screen")
        fruit.hit = True
        self.cut += fruit.kind.points
        if fruit.kind is FruitKind.WATERMELON:
            fruit.moving = False
        self._at(REMOVE_DELAY_MS, lambda: self._remove(fruit))
        return self.cut

    def finish(self) -> GameResult:
        """End the game, updating the high score; repeated calls return the same result."""
        if self.result is None:
            new_record = self.cut > self.high_score
            if new_record:
                self.high_score = self.cut
            self.result = GameResult(self.cut, self.missed, self.high_score, new_record)
        return self.result