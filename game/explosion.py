from dataclasses import dataclass
import random

import pygame
from pygame.math import Vector2

from config import *


@dataclass(frozen=True)
class Pop:
    """One explosion particle. ``delay`` is the step at which it starts playing."""

    position: Vector2
    delay: int


class Explosion:
    """Delay-staggered burst of pops laid over the snake's last trail.

    Each pop plays a ``frame_count`` frame animation spread over
    ``duration`` steps, starting at its own delay. ``step`` only moves
    forward, so a pop never replays.
    """

    def __init__(self, segments, frame_count=POP_FRAMES, rng=random,
                 chance=POP_CHANCE, jitter=POP_JITTER, duration=POP_DURATION):
        self.frame_count = int(frame_count)
        self.duration = int(duration)
        self.step = 0
        self.pops = []
        for segment in segments:
            if rng.random() < chance:
                offset = Vector2(jitter * (rng.random() - 0.5),
                                 jitter * (rng.random() - 0.5))
                self.pops.append(Pop(segment.position + offset,
                                     rng.randrange(self.duration)))

    def update(self):
        self.step += 1

    def frame_of(self, pop):
        """Animation frame ``pop`` shows at the current step, or None."""
        frame = (self.step - pop.delay) * self.frame_count // self.duration
        if 0 <= frame < self.frame_count:
            return frame
        return None

    def active(self):
        """Yield (pop, frame) for every pop currently on screen."""
        for pop in self.pops:
            frame = self.frame_of(pop)
            if frame is not None:
                yield pop, frame

    @property
    def finished(self):
        return all(self.step >= pop.delay + self.duration for pop in self.pops)

    def draw(self, screen, frames):
        for pop, frame in self.active():
            image = frames[frame]
            rect = image.get_rect(center=(int(pop.position.x), int(pop.position.y)))
            screen.blit(image, rect)


def make_pop_frames(count=POP_FRAMES, max_radius=POP_MAX_RADIUS):
    """Generate a sprite sheet for a pop: a ring that grows and fades."""
    frames = []
    size = max_radius * 2 + 4
    center = (size // 2, size // 2)
    for i in range(count):
        t = (i + 1) / count
        surface = pygame.Surface((size, size), pygame.SRCALPHA)
        alpha = int(255 * (1.0 - t * 0.8))
        radius = max(2, int(max_radius * t))
        core = max(1, int(radius * (1.0 - t)))
        pygame.draw.circle(surface, (*ORANGE, alpha), center, radius, max(1, radius // 3))
        pygame.draw.circle(surface, (*YELLOW, alpha), center, core)
        frames.append(surface)
    return frames
