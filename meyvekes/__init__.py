"""A fruit-cutting arcade game: game rules, score files and a Tk window."""

__version__ = "0.1.0"
__all__ = ["app", "game", "storage"]