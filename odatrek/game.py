"""Application: opens a window, reacts to its events and redraws continuously."""

from __future__ import annotations

import argparse
import logging

import pygame

from odatrek.graphics import GraphicsState
from odatrek.logger import OdatrekLogger

WINDOW_TITLE = "Test window"
WINDOW_SIZE = (1280, 720)
LOG_DIR = "./logs"

REDRAW_REQUESTED = pygame.event.custom_type()


class OdatrekGame:
    """Event handler owning the graphics state of the single game window."""

    def __init__(self) -> None:
        self.state: GraphicsState | None = None
        self.running = True
        self.redraw_requested = False

    def _exit(self) -> None:
        self.running = False

    def _request_redraw(self) -> None:
        self.redraw_requested = True

    def resumed(self) -> None:
        """Create the window and its graphics state, or stop if that fails."""
        try:
            pygame.display.init()
            window = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
            pygame.display.set_caption(WINDOW_TITLE)
        except pygame.error:
            print("No windows sorry")
            self._exit()
            return
        print("Window Created")
        self.state = GraphicsState(window)
        self._request_redraw()

    def window_event(self, event: pygame.event.Event) -> None:
        """Handle one window event."""
        if self.state is None:
            raise RuntimeError("window event received before the window was created")
        state = self.state
        if event.type == pygame.QUIT:
            self._exit()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self._exit()
        elif event.type == REDRAW_REQUESTED:
            state.render()
            self._request_redraw()
        elif event.type == pygame.VIDEORESIZE:
            # A redraw always follows, so no rendering here.
            state.resize(event.size)

    def run(self) -> None:
        """Run the event loop until the game exits."""
        pygame.init()
        try:
            self.resumed()
            while self.running:
                for event in pygame.event.get():
                    self.window_event(event)
                    if not self.running:
                        break
                if self.running and self.redraw_requested:
                    self.redraw_requested = False
                    self.window_event(pygame.event.Event(REDRAW_REQUESTED))
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game, logging to ``./logs`` and stowing the log on exit."""
    parser = argparse.ArgumentParser(prog="odatrek", description="Open the game window.")
    parser.parse_args(argv)

    handler = OdatrekLogger(LOG_DIR, logging.INFO, logging.ERROR)
    root = logging.getLogger()
    previous_level = root.level
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    status = 0
    try:
        try:
            OdatrekGame().run()
        except pygame.error as err:
            print(repr(err))
            status = 1
        else:
            print("Exited")
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)
        handler.stow_log()
        handler.close()
    return status