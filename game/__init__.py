"""Package initializer for the game package.

``from game import SnakeGame`` loads the pygame window class lazily, so the
headless simulation modules import without it.
"""

__version__ = "0.2"

__all__ = ["SnakeGame"]

def __getattr__(name: str):
	if name == "SnakeGame":
		from .utils import SnakeGame

		return SnakeGame
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__():
	return sorted(__all__)
