"""
Main game engine - owns the window, turns keyboard state into input flags,
and drives the simulation core once per frame.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Sequence, Union

import pygame

from config import (
    DEBUG,
    FPS,
    GAME_TITLE,
    SHOW_SEED_LABEL,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from randomness.graphics import font_cache
from randomness.graphics.renderer import render_frame
from randomness.input import (
    INPUT_DOWN_DOWN,
    INPUT_DOWN_PRESSED,
    INPUT_INTERACT_PRESSED,
    INPUT_LEFT_DOWN,
    INPUT_LEFT_PRESSED,
    INPUT_RIGHT_DOWN,
    INPUT_RIGHT_PRESSED,
    INPUT_UP_DOWN,
    INPUT_UP_PRESSED,
    InputFlags,
)
from randomness.sim import perf_stats
from randomness.sim.contracts import DrawWH
from randomness.sim.determinism import seed_from_int
from randomness.state import CommandBuffer, State, sizes, update


def debug_log(msg: str) -> None:
    if DEBUG:
        print(f"[engine] {msg}")


# (keys, pressed bit, held bit)
MOVE_BINDINGS = (
    ((pygame.K_UP, pygame.K_w), INPUT_UP_PRESSED, INPUT_UP_DOWN),
    ((pygame.K_DOWN, pygame.K_s), INPUT_DOWN_PRESSED, INPUT_DOWN_DOWN),
    ((pygame.K_LEFT, pygame.K_a), INPUT_LEFT_PRESSED, INPUT_LEFT_DOWN),
    ((pygame.K_RIGHT, pygame.K_d), INPUT_RIGHT_PRESSED, INPUT_RIGHT_DOWN),
)
INTERACT_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)
FULLSCREEN_KEY = pygame.K_F11

HeldKeys = Union[Sequence[bool], Mapping[int, bool]]


def input_flags_from_keys(pressed: Iterable[int], held: HeldKeys) -> InputFlags:
    """
    Build this frame's flags.

    `pressed` holds keys that went down this frame (KEYDOWN events);
    `held` is indexable by key constant, like pygame.key.get_pressed().
    """
    pressed = set(pressed)
    flags = 0

    if pressed.intersection(INTERACT_KEYS):
        flags |= INPUT_INTERACT_PRESSED

    for keys, pressed_bit, held_bit in MOVE_BINDINGS:
        if any(held[k] for k in keys):
            flags |= held_bit
        if pressed.intersection(keys):
            flags |= pressed_bit

    return flags


def surface_draw_wh(surface: pygame.Surface) -> DrawWH:
    return DrawWH(w=float(surface.get_width()), h=float(surface.get_height()))


class GameEngine:
    """Main game engine class."""

    def __init__(self, seed: int, fullscreen: bool = False):
        pygame.init()
        pygame.font.init()

        self.seed = int(seed)
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(GAME_TITLE)
        self.clock = pygame.time.Clock()
        self.running = True

        if fullscreen:
            self.toggle_fullscreen()

        self.state = State.from_seed(seed_from_int(self.seed))
        # Reused every frame; update() clears and refills it.
        self.commands = CommandBuffer()
        self._pressed_keys: set[int] = set()
        self.seed_label = f"seed {self.seed}" if SHOW_SEED_LABEL else None

        # generate the commands for the first frame
        update(self.state, self.commands, 0, surface_draw_wh(self.screen))

    def toggle_fullscreen(self):
        try:
            pygame.display.toggle_fullscreen()
        except pygame.error as e:
            debug_log(f"fullscreen toggle failed: {e}")
            return
        # The display surface can be replaced by the toggle.
        self.screen = pygame.display.get_surface()
        debug_log(f"fullscreen toggled, surface now {self.screen.get_size()}")

    def handle_events(self):
        """Process window + keyboard events for this frame."""
        self._pressed_keys.clear()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == FULLSCREEN_KEY:
                    self.toggle_fullscreen()
                else:
                    self._pressed_keys.add(event.key)

            elif event.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.get_surface()
                debug_log(f"resized to {self.screen.get_size()}")

    def step(self):
        """One frame of simulation: flags -> update()."""
        flags = input_flags_from_keys(self._pressed_keys, pygame.key.get_pressed())
        if flags:
            debug_log(f"input_flags=0b{flags:016b}")
        update(self.state, self.commands, flags, surface_draw_wh(self.screen))

    def render(self):
        render_frame(self.screen, sizes(self.state), self.commands, self.seed_label)
        pygame.display.flip()

    def run(self):
        """Main game loop."""
        while self.running:
            self.clock.tick(FPS)
            self.handle_events()
            if not self.running:
                break
            self.step()
            self.render()

        debug_log(
            f"frames={perf_stats.frames.updates} commands={perf_stats.frames.commands_pushed} "
            f"layout_recomputes={perf_stats.layout.recomputes}"
        )
        font_cache.clear()
        pygame.quit()
