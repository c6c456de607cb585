"""Tests for game/state.py - the pre-game / playing / dead state machine."""

import pytest
from pygame.math import Vector2

from game.food import Fruit
from game.segment import Direction, Speed
from game.state import Control, Dead, GameState, PlayState

SCREEN = (800, 600)


@pytest.fixture
def state(constant_rng):
    # constant_rng puts every fruit at (0, 0), far from the starting snake
    return GameState(SCREEN, rng=constant_rng)


def kill(state, now):
    """Drive a playing state into Dead on the next update."""
    state.snake.self_collision_skip = 0
    return state.update(SCREEN, now)


class TestInitialState:
    """Tests for a freshly constructed GameState."""

    def test_starts_in_pre_game(self, state):
        """The game waits for the start input."""
        assert state.play_state is PlayState.PRE_GAME
        assert state.explosion is None
        assert state.score == 0

    def test_controls_start_neutral(self, state):
        """Snake goes straight and coasts."""
        assert state.direction is Direction.STRAIGHT
        assert state.accelerate is Speed.COAST

    def test_one_fruit_spawned(self, state):
        """A fruit exists from the start."""
        assert state.fruit.position == Vector2(0, 0)
        assert state.fruit.variant == 0


class TestInput:
    """Tests for key_down() and release()."""

    def test_start_moves_to_playing(self, state):
        """START leaves the pre-game screen."""
        state.key_down(Control.START)
        assert state.play_state is PlayState.PLAYING

    def test_steering_ignored_before_start(self, state):
        """Direction keys do nothing in pre-game."""
        state.key_down(Control.LEFT)
        assert state.direction is Direction.STRAIGHT
        assert state.play_state is PlayState.PRE_GAME

    def test_steering_while_playing(self, state):
        """Each control sets its own field."""
        state.start()
        state.key_down(Control.LEFT)
        state.key_down(Control.ACCELERATE)
        assert state.direction is Direction.LEFT
        assert state.accelerate is Speed.ACCELERATE
        state.key_down(Control.RIGHT)
        state.key_down(Control.BRAKE)
        assert state.direction is Direction.RIGHT
        assert state.accelerate is Speed.BRAKE

    def test_other_key_resets_controls(self, state):
        """An unmapped key while playing goes back to straight and coast."""
        state.start()
        state.key_down(Control.LEFT)
        state.key_down(Control.ACCELERATE)
        state.key_down(Control.OTHER)
        assert state.direction is Direction.STRAIGHT
        assert state.accelerate is Speed.COAST

    def test_release_resets_controls(self, state):
        """Any key-up resets both controls."""
        state.start()
        state.key_down(Control.RIGHT)
        state.key_down(Control.BRAKE)
        state.release()
        assert state.direction is Direction.STRAIGHT
        assert state.accelerate is Speed.COAST

    def test_controls_steer_snake(self, state):
        """The stored controls are applied on update."""
        state.start()
        state.key_down(Control.ACCELERATE)
        state.update(SCREEN, 0.0)
        assert state.snake.head.speed == pytest.approx(1.1)


class TestFruit:
    """Tests for fruit pickup."""

    def place_fruit_on_next_nose(self, state):
        # After one straight update the head is at (399, 300) and the nose at (389, 300)
        state.fruit = Fruit((389, 300))

    def test_pre_game_pickup_respawns_without_growth(self, state):
        """Drifting into fruit before the game starts only moves the fruit."""
        self.place_fruit_on_next_nose(state)
        events = state.update(SCREEN, 0.0)
        assert state.fruit.position == Vector2(0, 0)
        assert state.snake.desired_length == 100.0
        assert state.score == 0
        assert events == []

    def test_playing_pickup_grows(self, state):
        """Eating while playing adds 100 to the length budget and scores."""
        state.start()
        self.place_fruit_on_next_nose(state)
        events = state.update(SCREEN, 0.0)
        assert state.fruit.position == Vector2(0, 0)
        assert state.snake.desired_length == 200.0
        assert state.score == 1
        assert events == ["eat"]

    def test_missed_fruit_stays(self, state):
        """A fruit out of reach is left alone."""
        state.fruit = Fruit((200, 200))
        state.update(SCREEN, 0.0)
        assert state.fruit.position == Vector2(200, 200)


class TestDeath:
    """Tests for Playing -> Dead -> PreGame."""

    def test_self_collision_kills(self, state):
        """The first self-collision while playing enters Dead."""
        state.start()
        events = kill(state, 10.0)
        assert events == ["die"]
        assert state.play_state is PlayState.DEAD
        assert isinstance(state.phase, Dead)
        assert state.phase.since == 10.0

    def test_explosion_built_from_trail(self, state):
        """Pops come from the trail snapshot at the moment of death."""
        state.start()
        kill(state, 10.0)
        explosion = state.explosion
        assert explosion is not None
        # constant_rng picks every segment with a (-10, -10) jitter
        assert len(explosion.pops) == 1
        assert explosion.pops[0].position == Vector2(390, 290)
        assert explosion.pops[0].delay == 0

    def test_explosion_steps_each_dead_frame(self, state):
        """The explosion is advanced on the death frame and every dead frame after."""
        state.start()
        kill(state, 10.0)
        assert state.explosion.step == 1
        state.update(SCREEN, 10.5)
        assert state.explosion.step == 2

    def test_no_self_collision_before_start(self, state):
        """Pre-game drifting never kills the snake."""
        state.snake.self_collision_skip = 0
        state.update(SCREEN, 0.0)
        assert state.play_state is PlayState.PRE_GAME

    def test_no_growth_while_dead(self, state):
        """Fruit eaten during the cooldown does not grow the snake."""
        state.start()
        kill(state, 10.0)
        state.fruit = Fruit(state.snake.nose + state.snake.head.heading * state.snake.head.speed)
        state.update(SCREEN, 10.1)
        assert state.snake.desired_length == 100.0
        assert state.score == 0

    def test_still_dead_before_cooldown(self, state):
        """At T + 1.9 s the state is still Dead."""
        state.start()
        kill(state, 10.0)
        events = state.update(SCREEN, 11.9)
        assert state.play_state is PlayState.DEAD
        assert state.explosion is not None
        assert events == []

    def test_reset_after_cooldown(self, state):
        """At T + 2.1 s the state resets to pre-game with a fresh snake."""
        state.start()
        state.snake.increase_length(500)
        kill(state, 10.0)
        events = state.update(SCREEN, 12.1)
        assert events == ["reset"]
        assert state.play_state is PlayState.PRE_GAME
        assert state.explosion is None
        assert len(state.snake.body) == 0
        assert state.snake.desired_length == 100.0
        assert state.snake.head.position == Vector2(400, 300)

    def test_restart_clears_score(self, state):
        """Starting a new game zeroes the score."""
        state.start()
        state.score = 4
        kill(state, 10.0)
        state.update(SCREEN, 13.0)
        assert state.score == 4
        state.key_down(Control.START)
        assert state.score == 0
        assert state.play_state is PlayState.PLAYING
