"""
pygame font + label cache.

The seed label is drawn every frame but changes never, so both the Font object and
the rendered text Surface are built once and reused.
"""

from __future__ import annotations

from typing import Dict, Tuple

import pygame

Color = Tuple[int, int, int]

_FONT_CACHE: Dict[int, pygame.font.Font] = {}
_LABEL_CACHE: Dict[Tuple[int, str, Color], pygame.Surface] = {}
_LABEL_CACHE_MAX = 64


def get_font(size: int) -> pygame.font.Font:
    """Default font at `size`, created on first use. Needs pygame.font.init() first."""
    s = int(size)
    font = _FONT_CACHE.get(s)
    if font is None:
        font = pygame.font.Font(None, s)
        _FONT_CACHE[s] = font
    return font


def render_label_cached(size: int, text: str, color: Color) -> pygame.Surface:
    key = (int(size), str(text), (int(color[0]), int(color[1]), int(color[2])))
    surf = _LABEL_CACHE.get(key)
    if surf is None:
        if len(_LABEL_CACHE) >= _LABEL_CACHE_MAX:
            _LABEL_CACHE.pop(next(iter(_LABEL_CACHE)))
        surf = get_font(size).render(str(text), True, color)
        _LABEL_CACHE[key] = surf
    return surf


def clear() -> None:
    """Drop cached fonts/labels (after pygame.quit() they are invalid)."""
    _FONT_CACHE.clear()
    _LABEL_CACHE.clear()
