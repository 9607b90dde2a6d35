"""Tk window for the fruit-cutting game and the command that starts it."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterable, Optional, Sequence

from .game import DEFAULT_HEIGHT, FRUIT_HEIGHT, FRUIT_WIDTH, Fruit, FruitKind, Game, GameResult
from .storage import Coordinate, load_coordinates, read_high_score, write_high_score

WINDOW_WIDTH = 1400
BAND_HEIGHT = 100
FRAME_MS = 20
ICON_SIZE = 50

_COLOURS = {
    (FruitKind.WATERMELON, False): ("#2e8b2e", "#145214"),
    (FruitKind.WATERMELON, True): ("#e8394a", "#2e8b2e"),
    (FruitKind.BANANA, False): ("#f5d000", "#8a6d00"),
    (FruitKind.BANANA, True): ("#fff4c2", "#f5d000"),
}


def _fruit_at(fruits: Sequence[Fruit], x: int, y: int) -> Optional[Fruit]:
    """Return the topmost fruit whose button covers the point."""
    for fruit in reversed(fruits):
        if fruit.x <= x < fruit.x + FRUIT_WIDTH and fruit.y <= y < fruit.y + FRUIT_HEIGHT:
            return fruit
    return None


class FruitApp:
    """Draws a game on a Tk canvas and feeds it time and clicks."""

    def __init__(self, root, game: Game, score_path) -> None:
        import tkinter as tk

        self.root = root
        self.game = game
        self.score_path = score_path
        self._start = 0.0
        self._done = False
        root.title("Meyve Kesme")
        self.canvas = tk.Canvas(
            root,
            width=WINDOW_WIDTH,
            height=game.height,
            background="#cfe8ff",
            highlightthickness=0,
        )
        self.canvas.pack()
        self.canvas.bind("<Button-1>", self._on_click)
        root.protocol("WM_DELETE_WINDOW", self._close)

    def run(self) -> None:
        """Start the clock and enter the Tk main loop."""
        self._start = time.monotonic()
        self._draw()
        self.root.after(FRAME_MS, self._frame)
        self.root.mainloop()

    def _frame(self) -> None:
        if self._done:
            return
        now_ms = int((time.monotonic() - self._start) * 1000)
        result = self.game.advance(max(0, now_ms - self.game.elapsed))
        self._draw()
        if result is not None:
            self._end(result)
        else:
            self.root.after(FRAME_MS, self._frame)

    def _on_click(self, event) -> None:
        if self._done or self.game.finished:
            return
        fruit = _fruit_at(self.game.fruits, event.x, event.y)
        if fruit is not None:
            self.game.click(fruit)
            self._draw()

    def _close(self) -> None:
        self._end(self.game.finish())

    def _end(self, result: GameResult) -> None:
        from tkinter import messagebox

        if self._done:
            return
        self._done = True
        title, text = result.message()
        messagebox.showinfo(title, text, parent=self.root)
        try:
            write_high_score(self.score_path, result.high_score)
        except OSError as exc:
            print(f"Dosya açılamadı: {exc}", file=sys.stderr)
        self.root.destroy()

    def _draw(self) -> None:
        canvas = self.canvas
        canvas.delete("all")
        canvas.create_rectangle(0, 0, WINDOW_WIDTH, BAND_HEIGHT, fill="white", outline="")
        canvas.create_text(5, 40, text="Süre ", anchor="nw", font=("Arial", 18))
        canvas.create_text(
            70, 36, text=str(self.game.remaining), anchor="nw", font=("Arial", 22), fill="blue"
        )
        canvas.create_text(
            800, 10, text="Kesilen Karpuz Sayısı=", anchor="nw", font=("Arial", 18)
        )
        canvas.create_text(
            1100, 10, text=str(self.game.cut), anchor="nw", font=("Arial", 18), fill="green"
        )
        canvas.create_text(
            800, 40, text="Kaçırılan karpuz sayısı=", anchor="nw", font=("Arial", 18)
        )
        canvas.create_text(
            1100, 40, text=str(self.game.missed), anchor="nw", font=("Arial", 18), fill="red"
        )
        for fruit in self.game.fruits:
            fill, outline = _COLOURS[(fruit.kind, fruit.hit)]
            left = fruit.x + (FRUIT_WIDTH - ICON_SIZE) // 2
            top = fruit.y + (FRUIT_HEIGHT - ICON_SIZE) // 2
            canvas.create_oval(
                left, top, left + ICON_SIZE, top + ICON_SIZE, fill=fill, outline=outline, width=3
            )


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(prog="meyvekes", description="Fruit-cutting arcade game.")
    parser.add_argument(
        "--coordinates", default="konumlar.txt", help="file of 'x y' watermelon drop positions"
    )
    parser.add_argument("--scores", default="skorlar.txt", help="high-score file")
    parser.add_argument(
        "--height", type=_positive_int, default=DEFAULT_HEIGHT, help="playing field height"
    )
    return parser


def _load_state(coordinate_path, score_path) -> tuple[list[Optional[Coordinate]], int]:
    """Load coordinates and high score, warning and falling back on unreadable files."""
    coordinates: Iterable[Optional[Coordinate]]
    try:
        coordinates = load_coordinates(coordinate_path)
    except OSError as exc:
        print(f"Dosya açılamadı: {exc}", file=sys.stderr)
        coordinates = []
    try:
        high_score = read_high_score(score_path)
    except OSError as exc:
        print(f"Dosya açılamadı: {exc}", file=sys.stderr)
        high_score = 0
    return list(coordinates), high_score


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game window."""
    import tkinter as tk

    args = build_parser().parse_args(argv)
    coordinates, high_score = _load_state(args.coordinates, args.scores)
    root = tk.Tk()
    game = Game(coordinates, high_score, args.height)
    FruitApp(root, game, args.scores).run()
    return 0