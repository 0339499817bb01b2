"""
Tests for the game engine state machine, scrolling, spawning and scoring.
"""

import random

import pytest

from flappy.config import GameConfig
from flappy.data_models import GameState, Pipe
from flappy.engine import GameEngine
from flappy.score_db import MemoryScoreStore


class TestStateMachine:
    """Idle / running / over transitions."""

    def test_starts_idle(self, engine):
        assert engine.state is GameState.IDLE
        assert engine.score == 0
        assert engine.pipes == []

    def test_tick_ignored_while_idle(self, engine):
        frame = engine.tick()
        assert frame.state is GameState.IDLE
        assert engine.bird.y == 300
        assert engine.pipes == []

    def test_jump_from_idle_starts_and_flaps(self, engine):
        engine.jump()
        assert engine.state is GameState.RUNNING
        assert engine.bird.velocity == -8
        assert engine.bird.rotation == -20

    def test_double_jump_does_not_accumulate(self, engine):
        engine.jump()
        engine.jump()
        assert engine.bird.velocity == engine.config.jump_impulse

    def test_jump_while_running_keeps_session(self, engine):
        engine.jump()
        for _ in range(5):
            engine.tick()
        y = engine.bird.y
        pipes = list(engine.pipes)
        engine.jump()
        assert engine.state is GameState.RUNNING
        assert engine.bird.y == y
        assert engine.pipes == pipes
        assert engine.bird.velocity == -8

    def test_ground_collision_ends_session(self, engine):
        engine.jump()
        engine.bird.y = 600
        frame = engine.tick()
        assert frame.state is GameState.OVER
        assert engine.is_game_over()

    def test_tick_ignored_when_over(self, engine):
        engine.jump()
        engine.bird.y = 600
        engine.tick()
        before = engine.snapshot()
        after = engine.tick()
        assert after == before

    def test_reset_from_over_goes_idle(self, engine):
        engine.jump()
        engine.bird.y = 600
        engine.tick()
        engine.reset()
        assert engine.state is GameState.IDLE

    def test_jump_from_over_restarts(self, engine):
        engine.jump()
        engine.score = 4
        engine.bird.y = 600
        engine.tick()
        engine.jump()
        assert engine.state is GameState.RUNNING
        assert engine.score == 0
        assert engine.pipes == []
        assert engine.bird.y == 300
        assert engine.bird.velocity == -8


class TestReset:
    """Reset always yields the spawn pose."""

    @pytest.mark.parametrize("ticks", [0, 1, 50, 400])
    def test_reset_is_idempotent(self, engine, ticks, hover):
        engine.jump()
        for _ in range(ticks):
            hover(engine)
        engine.score = 3
        engine.reset()
        engine.reset()
        assert (engine.bird.x, engine.bird.y) == (100, 300)
        assert engine.bird.velocity == 0
        assert engine.bird.rotation == 0
        assert engine.pipes == []
        assert engine.score == 0
        assert engine.new_record is False

    def test_reset_start_runs(self, engine):
        engine.reset(start=True)
        assert engine.state is GameState.RUNNING
        assert engine.bird.velocity == 0


class TestBirdPhysics:
    """Integration order and the derived rotation."""

    def test_position_then_velocity(self, engine):
        engine.jump()
        engine.tick()
        assert engine.bird.y == 292
        assert engine.bird.velocity == -7.5
        assert engine.bird.rotation == -22.5

    def test_rotation_clamped_nose_down(self, engine):
        engine.reset(start=True)
        engine.bird.y = 100
        engine.bird.velocity = 20
        engine.tick()
        assert engine.bird.rotation == 45

    def test_x_never_changes(self, engine, hover):
        engine.jump()
        for _ in range(200):
            hover(engine)
        assert engine.bird.x == 100


class TestPipes:
    """Scrolling, recycling and spawn policy."""

    def test_first_tick_spawns_at_right_edge(self, engine):
        engine.jump()
        engine.tick()
        assert len(engine.pipes) == 1
        assert engine.pipes[0].x == 800
        assert engine.pipes[0].top_height == 125
        assert engine.pipes[0].gap == 150

    def test_scroll_is_constant(self, engine, hover):
        engine.jump()
        hover(engine)
        for _ in range(100):
            before = {p.id: p.x for p in engine.pipes}
            hover(engine)
            for pipe in engine.pipes:
                if pipe.id in before:
                    assert pipe.x == before[pipe.id] - 2

    def test_spawn_when_last_pipe_clears_spacing(self, engine, hover):
        engine.jump()
        hover(engine)
        ticks = 1
        while len(engine.pipes) == 1:
            hover(engine)
            ticks += 1
        assert engine.pipes[0].x < 500
        assert engine.pipes[0].x == 498
        assert engine.pipes[1].x == 800
        assert ticks == 152

    def test_pipes_ordered_and_unique(self, engine, hover):
        engine.jump()
        for _ in range(1000):
            hover(engine)
        xs = [p.x for p in engine.pipes]
        assert xs == sorted(xs)
        ids = [p.id for p in engine.pipes]
        assert len(set(ids)) == len(ids)

    def test_pipe_kept_until_fully_offscreen(self, engine, hover):
        engine.reset(start=True)
        engine.pipes = [Pipe(x=-56, top_height=125, gap=150, id=99, passed=True)]
        hover(engine)
        assert engine.pipes[0].id == 99
        assert engine.pipes[0].x == -58

    def test_pipe_removed_when_offscreen(self, engine, hover):
        engine.reset(start=True)
        engine.pipes = [Pipe(x=-58, top_height=125, gap=150, id=99, passed=True)]
        hover(engine)
        assert [p.id for p in engine.pipes] != [99]
        assert all(p.id != 99 for p in engine.pipes)

    def test_gap_within_range(self, config):
        engine = GameEngine(config, rng=random.Random(7))
        engine.jump()
        for _ in range(3000):
            engine.bird.y, engine.bird.velocity = 300.0, 0.0
            engine.pipes = [p for p in engine.pipes if p.x > 200]
            engine.tick()
            for pipe in engine.pipes:
                assert 50 <= pipe.top_height < 200
                assert pipe.gap_bottom < config.ground_y


class TestScoring:
    """One point per pipe, exactly once."""

    def test_score_on_trailing_edge(self, engine, hover):
        engine.jump()
        hover(engine)
        first = engine.pipes[0]
        while engine.score == 0:
            frame = hover(engine)
            assert frame.state is GameState.RUNNING
        scored = next(p for p in engine.pipes if p.id == first.id)
        assert scored.passed
        assert scored.x + 60 < 100
        assert scored.x == 38

    def test_scored_only_once(self, engine, hover):
        engine.jump()
        while engine.score == 0:
            hover(engine)
        for _ in range(100):
            hover(engine)
        assert engine.score == 1

    def test_score_counts_pipes(self, engine, hover):
        engine.jump()
        for _ in range(1000):
            hover(engine)
        assert engine.get_score() == 5


class TestBestScore:
    """Best score lives in the injected store."""

    def _finish(self, engine, score):
        engine.jump()
        engine.score = score
        engine.bird.y = 600
        return engine.tick()

    def test_read_once_at_construction(self):
        engine = GameEngine(store=MemoryScoreStore(5))
        assert engine.high_score == 5

    def test_new_record_written(self):
        store = MemoryScoreStore(5)
        engine = GameEngine(store=store)
        frame = self._finish(engine, 7)
        assert store.get_best() == 7
        assert frame.high_score == 7
        assert frame.new_record

    def test_lower_score_leaves_best(self):
        store = MemoryScoreStore(5)
        engine = GameEngine(store=store)
        frame = self._finish(engine, 3)
        assert store.get_best() == 5
        assert frame.high_score == 5
        assert not frame.new_record

    def test_written_once_per_session(self):
        writes = []

        class RecordingStore(MemoryScoreStore):
            def set_best(self, score):
                writes.append(score)
                super().set_best(score)

        engine = GameEngine(store=RecordingStore(0))
        self._finish(engine, 2)
        engine.tick()
        engine.tick()
        assert writes == [2]


class TestConfigValidation:
    def test_gap_must_fit(self):
        with pytest.raises(ValueError):
            GameEngine(GameConfig(pipe_gap=550))

    def test_top_range_must_hold_gap(self):
        with pytest.raises(ValueError):
            GameConfig(pipe_top_range=150, pipe_gap=150).validate()

    def test_defaults_valid(self):
        assert GameConfig().validate().ground_y == 550


def test_snapshot_is_detached(engine):
    engine.jump()
    frame = engine.tick()
    frame.bird.y = -500
    frame.pipes[0].x = 0
    assert engine.bird.y == 292
    assert engine.pipes[0].x == 800


def test_fixed_random_is_used(config, fixed_random):
    engine = GameEngine(config, rng=fixed_random(0.0))
    engine.jump()
    engine.tick()
    assert engine.pipes[0].top_height == 50


def test_frame_carries_all_session_state(engine):
    engine.jump()
    frame = engine.tick()
    assert not hasattr(engine, "tick_count")
    assert (frame.score, frame.high_score, frame.state, frame.new_record) == (
        engine.score, engine.high_score, engine.state, engine.new_record)
