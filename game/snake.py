from collections import deque
from itertools import islice

import pygame
from pygame.math import Vector2

from config import *
from game.segment import Direction, Speed, Segment


def collide(a, radius_a, b, radius_b):
    """Circle-circle overlap test."""
    reach = radius_a + radius_b
    return Vector2(a).distance_squared_to(b) < reach * reach


class Snake:
    """Head segment plus a trail of past head samples bounded by a length budget.

    The trail is ordered oldest to newest. Its length is the summed speed of
    its entries, so a fast snake covers the same distance with fewer samples.
    """

    def __init__(self, screen_size=(GAME_WIDTH, GAME_HEIGHT), head_radius=HEAD_RADIUS,
                 self_collision_skip=SELF_COLLISION_SKIP):
        self.head_radius = float(head_radius)
        self.self_collision_skip = int(self_collision_skip)
        self.reset(screen_size)

    def reset(self, screen_size=(GAME_WIDTH, GAME_HEIGHT)):
        """Reset snake to initial state."""
        w, h = screen_size
        self.head = Segment((w / 2, h / 2), INITIAL_ANGLE, INITIAL_SPEED)
        self.body = deque()
        self.desired_length = INITIAL_LENGTH
        self.current_length = 0.0
        self._update_nose()

    def _update_nose(self):
        self.nose = self.head.position + self.head.heading * self.head_radius

    def update(self, screen_size, direction=Direction.STRAIGHT, accel=Speed.COAST):
        """Lay down a copy of the head, trim the tail, then move the head.

        The trail therefore lags the head by exactly one frame.
        """
        self.body.append(self.head.copy())
        self.current_length += self.head.speed

        while self.current_length > self.desired_length and self.body:
            self.current_length -= self.body.popleft().speed
        if not self.body:
            self.current_length = 0.0

        w, h = screen_size
        self.head.update(((0.0, 0.0), (w, h)), direction, accel)
        self._update_nose()

    def increase_length(self, amount):
        self.desired_length = max(0.0, min(MAX_LENGTH, self.desired_length + amount))

    def collide(self, point, radius):
        """Check if the nose touches a circle at ``point``."""
        return collide(self.nose, self.head_radius, point, radius)

    def collide_self(self):
        """Check if the nose hits the body, ignoring the most recent samples."""
        body_radius = self.head_radius / 2
        recent_first = reversed(self.body)
        for segment in islice(recent_first, self.self_collision_skip, None):
            if collide(self.nose, self.head_radius, segment.position, body_radius):
                return True
        return False

    def segments(self):
        """Ordered copy of the trail, oldest first."""
        return list(self.body)

    def draw(self, screen):
        """Draw the trail as striped discs and the head with eyes."""
        body_size = max(1, int(self.head_radius * 0.8))
        travelled = 0.0
        for segment in self.body:
            travelled += segment.speed
            stripe = int(travelled // SNAKE_STRIPE_LENGTH) % 2
            color = DARK_GREEN if stripe else GREEN
            pos = (int(segment.position.x), int(segment.position.y))
            pygame.draw.circle(screen, color, pos, body_size)

        head_pos = (int(self.head.position.x), int(self.head.position.y))
        head_size = int(self.head_radius)
        pygame.draw.circle(screen, GREEN, head_pos, head_size)
        pygame.draw.circle(screen, WHITE, head_pos, head_size, 2)

        heading = self.head.heading
        side = Vector2(-heading.y, heading.x)
        offset = self.head_radius * 0.45
        for sign in (1, -1):
            eye = self.head.position + heading * offset + side * offset * sign
            eye_pos = (int(eye.x), int(eye.y))
            pygame.draw.circle(screen, WHITE, eye_pos, 3)
            pygame.draw.circle(screen, BLACK, eye_pos, 1)
