from enum import Enum, auto

from pygame.math import Vector2

from config import *


class Direction(Enum):
    LEFT = auto()
    RIGHT = auto()
    STRAIGHT = auto()


class Speed(Enum):
    ACCELERATE = auto()
    BRAKE = auto()
    COAST = auto()


def wrap(a, lo, hi):
    """Fold a coordinate back into [lo, hi] on a toroidal screen.

    A single correction is applied, so ``a`` is expected to be at most one
    period outside the range.
    """
    if a < lo:
        return a + (hi - lo)
    if a > hi:
        return a - (hi - lo)
    return a


class Segment:
    """One kinematic sample of the snake: position, heading angle and speed."""

    def __init__(self, position, angle=INITIAL_ANGLE, speed=INITIAL_SPEED):
        self.position = Vector2(position)
        self.angle = float(angle)
        self.speed = float(speed)

    def __repr__(self):
        return (f"Segment(position=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"angle={self.angle:.3f}, speed={self.speed:.2f})")

    @property
    def heading(self):
        """Unit vector the segment moves along; angle 0 points left."""
        return Vector2(-1.0, 0.0).rotate_rad(self.angle)

    def copy(self):
        return Segment(self.position, self.angle, self.speed)

    def advance(self):
        self.position += self.heading * self.speed

    def wrap(self, min_corner, max_corner):
        self.position.x = wrap(self.position.x, min_corner[0], max_corner[0])
        self.position.y = wrap(self.position.y, min_corner[1], max_corner[1])

    def turn(self, direction):
        # Steering is scaled by speed
        if direction is Direction.LEFT:
            self.angle -= TURN_RATE * self.speed
        elif direction is Direction.RIGHT:
            self.angle += TURN_RATE * self.speed

    def accelerate(self, mode):
        if mode is Speed.ACCELERATE:
            self.speed += ACCEL_STEP
        elif mode is Speed.BRAKE:
            self.speed -= ACCEL_STEP
        self.speed = max(0.0, min(MAX_SPEED, self.speed))

    def update(self, bounds, direction, accel):
        """Advance, wrap into ``bounds`` ((min_x, min_y), (max_x, max_y)), then
        apply steering and throttle for the next frame."""
        self.advance()
        self.wrap(*bounds)
        self.turn(direction)
        self.accelerate(accel)
