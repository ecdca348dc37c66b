"""Window surface state: clears the window to a colour that cycles through the rainbow."""

from __future__ import annotations

import logging
import math
import time

import pygame

from odatrek.color import okhsv_to_srgb, rainbow_hue

_log = logging.getLogger(__name__)

_SATURATION = 0.75
_VALUE = 1.0


def frames_per_second(frame_time_us: int) -> float:
    """Frame rate for a frame that took ``frame_time_us`` microseconds,
    rounded to three decimal places (halves away from zero)."""
    if frame_time_us <= 0:
        return math.inf
    scaled = 1000.0 / (frame_time_us / 1_000_000.0)
    return math.floor(scaled + 0.5) / 1000.0


def _format_rate(rate: float) -> str:
    text = repr(rate)
    return text[:-2] if text.endswith(".0") else text


def _to_byte(component: float) -> int:
    return round(min(max(component, 0.0), 1.0) * 255)


def _now_us() -> int:
    return time.time_ns() // 1000


class GraphicsState:
    """Holds the window surface and draws one frame per call to :meth:`render`."""

    def __init__(self, window: pygame.Surface) -> None:
        self._window = window
        self.size: tuple[int, int] = tuple(window.get_size())
        self.last_frame_time = 0
        self.clear_color: tuple[int, int, int] = (0, 0, 0)
        self._configure_surface()

    @property
    def window(self) -> pygame.Surface:
        """The surface frames are drawn on."""
        return self._window

    def _configure_surface(self) -> None:
        width, height = self.size
        if width < 0 or height < 0:
            raise ValueError(f"surface size must not be negative, got {self.size}")

    def resize(self, new_size: tuple[int, int]) -> None:
        """Record the new window size and reconfigure the surface for it."""
        width, height = new_size
        self.size = (int(width), int(height))
        self._configure_surface()

    def render(self) -> int:
        """Clear the window to the current rainbow colour and present it.

        Returns the time in microseconds since the previous frame.
        """
        now = _now_us()
        frame_time = now - self.last_frame_time
        self.last_frame_time = now
        _log.info("%sfps", _format_rate(frames_per_second(frame_time)))

        hue = rainbow_hue(self.last_frame_time)
        red, green, blue = okhsv_to_srgb(hue, _SATURATION, _VALUE)
        self.clear_color = (_to_byte(red), _to_byte(green), _to_byte(blue))
        self._window.fill(self.clear_color)

        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.display.flip()
        return frame_time