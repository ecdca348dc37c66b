import math
from unittest import mock

import pygame
import pytest

from odatrek.graphics import GraphicsState, frames_per_second


@pytest.fixture
def surface():
    return pygame.Surface((64, 48))


def test_initial_size_taken_from_window(surface):
    state = GraphicsState(surface)
    assert state.size == (64, 48)
    assert state.last_frame_time == 0
    assert state.window is surface


def test_resize_records_new_size(surface):
    state = GraphicsState(surface)
    state.resize((100, 50))
    assert state.size == (100, 50)


def test_resize_rejects_negative_size(surface):
    state = GraphicsState(surface)
    with pytest.raises(ValueError):
        state.resize((-1, 10))


def test_render_returns_time_since_previous_frame(surface):
    state = GraphicsState(surface)
    with mock.patch("time.time_ns", side_effect=[5_000_000_000, 5_016_000_000]):
        first = state.render()
        second = state.render()
    assert first == 5_000_000
    assert second == 16_000
    assert state.last_frame_time == 5_016_000


def test_render_fills_window_with_clear_color(surface):
    state = GraphicsState(surface)
    with mock.patch("time.time_ns", return_value=1_234_000_000):
        state.render()
    assert tuple(surface.get_at((0, 0)))[:3] == state.clear_color
    assert tuple(surface.get_at((63, 47)))[:3] == state.clear_color
    assert all(0 <= c <= 255 for c in state.clear_color)


def test_color_repeats_every_two_seconds(surface):
    state = GraphicsState(surface)
    with mock.patch("time.time_ns", side_effect=[300_000_000, 2_300_000_000]):
        state.render()
        first = state.clear_color
        state.render()
    assert state.clear_color == first


def test_color_changes_over_time(surface):
    state = GraphicsState(surface)
    with mock.patch("time.time_ns", side_effect=[0, 1_000_000_000]):
        state.render()
        first = state.clear_color
        state.render()
    assert state.clear_color != first
    assert state.last_frame_time == 1_000_000


def test_frames_per_second_one_second_frame():
    assert frames_per_second(1_000_000) == 1.0


def test_frames_per_second_zero_time_is_infinite():
    rate = frames_per_second(0)
    assert rate == math.inf


def test_frames_per_second_decreases_with_longer_frames():
    assert frames_per_second(1_000) > frames_per_second(2_000) > frames_per_second(16_000)


def test_frames_per_second_has_three_decimals():
    rate = frames_per_second(16_667)
    assert round(rate, 3) == rate