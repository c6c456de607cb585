import logging

from config import LOG_FORMAT, LOG_LEVEL
from game import SnakeGame


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    game = SnakeGame()
    game.run()


if __name__ == "__main__":
    main()
