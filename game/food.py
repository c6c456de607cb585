import math
import random

import pygame
from pygame.math import Vector2

from config import *


class Fruit:
    """A single piece of fruit. A new one is spawned every time it is eaten."""

    def __init__(self, position, variant=0, radius=FRUIT_RADIUS):
        self.position = Vector2(position)
        self.variant = int(variant)
        self.radius = float(radius)
        self.pulse_phase = 0.0

    @classmethod
    def spawn(cls, width, height, rng=random, radius=FRUIT_RADIUS):
        """Spawn fruit at a uniformly random point on screen."""
        position = (rng.random() * width, rng.random() * height)
        variant = rng.randrange(256) % FRUIT_VARIANTS
        return cls(position, variant, radius)

    def draw(self, screen):
        """Draw fruit with a pulsing outline."""
        self.pulse_phase += 0.12
        pos = (int(self.position.x), int(self.position.y))
        size = max(1, int(round(self.radius)))
        color = FRUIT_COLORS[self.variant % len(FRUIT_COLORS)]
        pygame.draw.circle(screen, color, pos, size)
        outline = max(1, int(round(self.radius + math.sin(self.pulse_phase) * 2.0)))
        pygame.draw.circle(screen, WHITE, pos, outline, 2)
        # stalk
        pygame.draw.line(screen, DARK_GREEN, (pos[0], pos[1] - size),
                         (pos[0] + 4, pos[1] - size - 6), 3)
