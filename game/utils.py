import json
import logging
import os
import time

import pygame

from config import *
from game.audio import load_sounds
from game.explosion import make_pop_frames
from game.state import Control, GameState, PlayState

logger = logging.getLogger(__name__)

KEY_CONTROLS = {
    pygame.K_a: Control.LEFT,
    pygame.K_LEFT: Control.LEFT,
    pygame.K_d: Control.RIGHT,
    pygame.K_RIGHT: Control.RIGHT,
    pygame.K_w: Control.ACCELERATE,
    pygame.K_UP: Control.ACCELERATE,
    pygame.K_s: Control.BRAKE,
    pygame.K_DOWN: Control.BRAKE,
    pygame.K_SPACE: Control.START,
}


class SnakeGame:
    """Window, frame loop and rendering around a GameState."""

    def __init__(self):
        pygame.init()
        self.screen = pygame.display.set_mode((GAME_WIDTH, GAME_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 24)

        self.state = GameState(self.screen.get_size())
        self.pop_frames = make_pop_frames()
        self.running = True
        self.muted = False

        # High score persistence
        self.highscore_file = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', HIGHSCORE_FILE))
        self.highscore = self._load_highscore()

        # Audio is optional; the game runs silently without a mixer
        try:
            self.sounds = load_sounds()
        except (pygame.error, ValueError) as exc:
            logger.warning("Sound disabled: %s", exc)
            self.sounds = {}

    def _load_highscore(self):
        """Load highscore from disk, return 0 if not found or unreadable."""
        if not os.path.exists(self.highscore_file):
            return 0
        try:
            with open(self.highscore_file, 'r') as f:
                return int(json.load(f).get('highscore', 0))
        except (OSError, ValueError, AttributeError) as exc:
            logger.warning("Could not read high score from %s: %s", self.highscore_file, exc)
            return 0

    def _save_highscore(self):
        try:
            with open(self.highscore_file, 'w') as f:
                json.dump({'highscore': int(self.highscore)}, f)
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.highscore_file, exc)

    def play(self, name):
        if not self.muted and name in self.sounds:
            self.sounds[name].play()

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_m:
                self.muted = not self.muted
                # not a steering key, so it releases the controls like any other
                self.state.key_down(Control.OTHER)
            else:
                was_waiting = self.state.play_state is PlayState.PRE_GAME
                self.state.key_down(KEY_CONTROLS.get(event.key, Control.OTHER))
                if was_waiting and self.state.play_state is PlayState.PLAYING:
                    self.play('start')
        elif event.type == pygame.KEYUP:
            self.state.release()

    def update(self):
        events = self.state.update(self.screen.get_size(), time.monotonic())
        if "eat" in events:
            self.play('eat')
        if "die" in events:
            self.play('die')
            if self.state.score > self.highscore:
                self.highscore = self.state.score
                self._save_highscore()
                logger.info("New high score: %d", self.highscore)

    def draw_text(self, text, pos, color=WHITE, font=None):
        """Draw text centred on ``pos``."""
        if font is None:
            font = self.font
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=pos)
        self.screen.blit(text_surface, text_rect)

    def draw_hud(self):
        w, h = self.screen.get_size()
        score_text = self.small_font.render(f"Score: {self.state.score}", True, WHITE)
        self.screen.blit(score_text, (10, 10))
        hs_text = self.small_font.render(f"High: {self.highscore}", True, WHITE)
        self.screen.blit(hs_text, (w - hs_text.get_width() - 10, 10))
        speed_text = self.small_font.render(f"Speed: {self.state.snake.head.speed:.1f}", True, WHITE)
        self.screen.blit(speed_text, (10, 10 + score_text.get_height() + 6))
        fps_text = self.small_font.render(f"FPS: {int(self.clock.get_fps())}", True, WHITE)
        self.screen.blit(fps_text, (10, h - fps_text.get_height() - 8))
        if self.muted:
            mute_text = self.small_font.render("MUTED", True, RED)
            self.screen.blit(mute_text, (w - mute_text.get_width() - 10, h - mute_text.get_height() - 8))

    def draw_waiting(self):
        w, h = self.screen.get_size()
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 110))
        self.screen.blit(overlay, (0, 0))
        self.draw_text("WRAPAROUND SNAKE", (w // 2, h // 2 - 40))
        self.draw_text("Press SPACE to start", (w // 2, h // 2 + 10), YELLOW, self.small_font)
        self.draw_text("A/D steer | W/S throttle | M mute | Esc quit",
                       (w // 2, h // 2 + 40), YELLOW, self.small_font)

    def draw(self):
        self.screen.fill(BACKGROUND)
        state = self.state
        if state.play_state is not PlayState.DEAD:
            state.snake.draw(self.screen)
        if state.explosion is not None and not state.explosion.finished:
            state.explosion.draw(self.screen, self.pop_frames)
        state.fruit.draw(self.screen)
        if state.play_state is PlayState.PRE_GAME:
            self.draw_waiting()
        self.draw_hud()
        pygame.display.flip()

    def run(self):
        """Main game loop."""
        logger.info("Starting main loop at %d FPS", FPS)
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.update()
                self.draw()
                self.clock.tick(FPS)
        finally:
            self.cleanup()

    def cleanup(self):
        self.running = False
        pygame.quit()
