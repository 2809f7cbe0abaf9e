"""Tests for PathAnimator playback."""
from __future__ import annotations

import pytest

from overlay_engine import PathAnimator, Point, Rejection


@pytest.fixture
def animator(config) -> PathAnimator:
    return PathAnimator(config.animation.path, tick_interval_ms=config.animation.tick_interval_ms)


class TestPathAnimator:
    def test_initially_empty(self, animator):
        assert animator.animated_path == ()
        assert not animator.is_animating
        assert animator.progress == "0/7"

    def test_start_reveals_first_point(self, animator, config):
        assert animator.start()
        assert animator.animated_path == (config.animation.path[0],)
        assert animator.is_animating
        assert animator.progress == "1/7"

    def test_ticks_reveal_in_order(self, animator, config):
        animator.start()
        revealed = [animator.tick() for _ in range(6)]

        assert revealed == list(config.animation.path[1:])
        assert animator.animated_path == config.animation.path
        assert not animator.is_animating
        assert animator.is_finished

    def test_tick_after_finish(self, animator):
        animator.start()
        while animator.is_animating:
            animator.tick()
        assert animator.tick() is None
        assert animator.progress == "7/7"

    def test_tick_before_start(self, animator):
        assert animator.tick() is None

    def test_restart_mid_playback(self, animator):
        animator.start()
        animator.tick()
        animator.tick()
        animator.start()
        assert animator.progress == "1/7"

    def test_reset(self, animator):
        animator.start()
        animator.tick()
        animator.reset()
        assert animator.animated_path == ()
        assert not animator.is_animating
        assert not animator.is_finished

    def test_empty_path(self):
        outcome = PathAnimator([]).start()
        assert outcome.reason is Rejection.EMPTY_PATH

    def test_single_point_finishes_on_start(self):
        animator = PathAnimator([Point(24.7, 46.6)])
        animator.start()
        assert not animator.is_animating
        assert animator.is_finished
