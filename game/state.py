"""Game state machine: pre-game, playing and dead phases.

The state is driven once per frame by :meth:`GameState.update` and holds
everything the renderer reads. It never touches the display, the clock or
the audio device; the caller passes the screen size and the current time.
"""

from dataclasses import dataclass
from enum import Enum, auto
import logging
import random

from config import *
from game.explosion import Explosion
from game.food import Fruit
from game.segment import Direction, Speed
from game.snake import Snake

logger = logging.getLogger(__name__)


class PlayState(Enum):
    PRE_GAME = auto()
    PLAYING = auto()
    DEAD = auto()


class Control(Enum):
    LEFT = auto()
    RIGHT = auto()
    ACCELERATE = auto()
    BRAKE = auto()
    START = auto()
    OTHER = auto()


@dataclass
class PreGame:
    play_state = PlayState.PRE_GAME


@dataclass
class Playing:
    play_state = PlayState.PLAYING


@dataclass
class Dead:
    since: float
    explosion: Explosion
    play_state = PlayState.DEAD


class GameState:
    def __init__(self, screen_size=(GAME_WIDTH, GAME_HEIGHT), rng=random,
                 dead_cooldown=DEAD_COOLDOWN, fruit_growth=FRUIT_GROWTH):
        self.rng = rng
        self.dead_cooldown = float(dead_cooldown)
        self.fruit_growth = float(fruit_growth)
        self.phase = PreGame()
        self.snake = Snake(screen_size)
        self.fruit = Fruit.spawn(*screen_size, rng=rng)
        self.direction = Direction.STRAIGHT
        self.accelerate = Speed.COAST
        self.score = 0

    @property
    def play_state(self):
        return self.phase.play_state

    @property
    def explosion(self):
        if isinstance(self.phase, Dead):
            return self.phase.explosion
        return None

    def start(self):
        if isinstance(self.phase, PreGame):
            self.phase = Playing()
            self.score = 0
            logger.info("Game started")

    def key_down(self, control):
        """Apply a pressed control. Steering only responds while playing."""
        if isinstance(self.phase, PreGame):
            if control is Control.START:
                self.start()
        elif isinstance(self.phase, Playing):
            if control is Control.LEFT:
                self.direction = Direction.LEFT
            elif control is Control.RIGHT:
                self.direction = Direction.RIGHT
            elif control is Control.ACCELERATE:
                self.accelerate = Speed.ACCELERATE
            elif control is Control.BRAKE:
                self.accelerate = Speed.BRAKE
            else:
                self.release()

    def release(self):
        self.direction = Direction.STRAIGHT
        self.accelerate = Speed.COAST

    def update(self, screen_size, now):
        """Advance one frame.

        Returns the names of the events that happened this frame
        (``"eat"``, ``"die"``, ``"reset"``) so the caller can react to them.
        """
        events = []
        w, h = screen_size
        self.snake.update((w, h), self.direction, self.accelerate)

        # The snake drifts before the game starts; only a live game grows it.
        if self.snake.collide(self.fruit.position, self.fruit.radius):
            self.fruit = Fruit.spawn(w, h, rng=self.rng, radius=self.fruit.radius)
            if isinstance(self.phase, Playing):
                self.snake.increase_length(self.fruit_growth)
                self.score += 1
                events.append("eat")

        if isinstance(self.phase, Playing) and self.snake.collide_self():
            explosion = Explosion(self.snake.segments(), rng=self.rng)
            self.phase = Dead(since=now, explosion=explosion)
            events.append("die")
            logger.info("Snake crashed with score %d, %d pops", self.score, len(explosion.pops))

        if isinstance(self.phase, Dead) and now - self.phase.since > self.dead_cooldown:
            self.phase = PreGame()
            self.snake.reset((w, h))
            events.append("reset")
            logger.info("Back to pre-game")

        if isinstance(self.phase, Dead):
            self.phase.explosion.update()

        return events
