# meyvekes

A small arcade game. Watermelons fall one after another from positions read
from a coordinates file, and you click them to cut them before they drop off
the bottom of the window. Every five seconds a banana falls quickly from a
random spot; clicking it is worth two points. The countdown starts at 33 and
drops by one each second; when it reaches zero the result is shown and the
best score is kept in a score file.

## Installing

```
pip install .
```

The game window uses Tkinter from the Python standard library; there are no
other dependencies.

## Playing

```
meyvekes
```

Options:

- `--coordinates PATH` – file of watermelon drop positions (default
  `konumlar.txt`)
- `--scores PATH` – high-score file (default `skorlar.txt`)
- `--height N` – height of the playing field in pixels, a positive integer
  (default 800)

Rules as the game applies them:

- One line of the coordinates file is used each second, in file order. A line
  made of two parts separated by a single space drops a watermelon at that
  x and y; a part that is not a whole number counts as 0. Any other line
  drops nothing for that second.
- Clicking a watermelon adds one to the cut count and stops it falling.
  A watermelon that falls past the bottom edge counts as missed.
- Clicking a banana adds two to the cut count; it keeps falling. Bananas that
  fall off the bottom are not counted as missed.
- A clicked fruit disappears three seconds later; every click on it until
  then scores again.
- The score file's last line is read as the best score at start-up. If either
  file cannot be read, a warning is printed and the game starts with no
  watermelons or a best score of 0. When the round ends, or the window is
  closed early, the result is shown and the best score is written back.

Fruits are drawn as coloured circles; the game shows no pictures and plays no
sound.

## Using it as a library

The game rules live in `meyvekes.game` and do not depend on any window. Time
is simulated in milliseconds:

```python
import random

from meyvekes.game import Game
from meyvekes.storage import load_coordinates, read_high_score

game = Game(load_coordinates("konumlar.txt"), read_high_score("skorlar.txt"),
            height=800, rng=random.Random())
game.advance(1000)          # move the clock on by one second
for fruit in list(game.fruits):
    game.click(fruit)
result = game.finish()
title, text = result.message()
print(title)
print(text)
```

- `Game.advance(ms)` runs the clock and returns a `GameResult` once the
  countdown has ended, otherwise `None`.
- `Game.click(fruit)` scores a `Fruit` and returns the new cut count; it
  raises `RuntimeError` after the game is over and `ValueError` for a fruit
  no longer on screen.
- `Game.spawn_watermelon(x, y)` and `Game.spawn_banana()` drop a fruit
  directly.
- `Game.finish()` ends the game and returns its `GameResult` (cut, missed,
  high score, and whether it is a new record).

`meyvekes.storage` provides `parse_coordinates`, `load_coordinates`,
`read_high_score` and `write_high_score` for the two text files.
`meyvekes.app` holds the Tk window, `FruitApp`, and the command's `main`.

## Running the tests

```
pip install .[test]
pytest
```