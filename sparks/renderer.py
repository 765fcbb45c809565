#!/usr/bin/env python3
"""
Render pass: paints a scene onto a pygame Surface.

The renderer only reads scene values. It clears the whole canvas each frame, then draws
projectiles and explosions in insertion order (back to front).

Drawing
- Projectiles: a line from the oldest trail point to the current position, plus a ring
  around the target whose radius pulses with target_radius.
- Particles: the same trail line, faded by the particle's alpha.
- Brightness maps to HSL lightness on a fixed hue.
"""
from typing import Optional, Tuple

import pygame
from pygame import gfxdraw

from .constants import (
    BACKGROUND_COLOR,
    DOT_COLOR,
    DOT_SIZE,
    HUD_TEXT_COLOR,
    PARTICLE_HUE,
    PROJECTILE_HUE,
    SAFE_COORD_LIMIT,
)
from .data_models import DotScene, Particle, Projectile, Scene
from .scene import scene_stats
from .vector_utils import clamp


def hsla_color(hue: float, lightness: float, alpha: float = 1.0) -> pygame.Color:
    """Fully saturated colour from hue (degrees), lightness (percent) and alpha (0..1)."""
    color = pygame.Color(0, 0, 0, 255)
    color.hsla = (hue % 360, 100, clamp(lightness, 0.0, 100.0), clamp(alpha * 100.0, 0.0, 100.0))
    return color


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    try:
        x, y = int(pt[0]), int(pt[1])
    except (TypeError, ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


def _draw_trail_line(surf: pygame.Surface, tail, head, color) -> None:
    tail_s = _safe_point(tail)
    head_s = _safe_point(head)
    if tail_s and head_s:
        gfxdraw.line(surf, tail_s[0], tail_s[1], head_s[0], head_s[1], color)


def draw_projectile(surf: pygame.Surface, p: Projectile) -> None:
    color = hsla_color(PROJECTILE_HUE, p.brightness)
    _draw_trail_line(surf, p.trail.oldest, p.position, color)
    target_s = _safe_point(p.target)
    if target_s:
        gfxdraw.aacircle(surf, target_s[0], target_s[1], max(1, int(p.target_radius)), color)


def draw_particle(surf: pygame.Surface, particle: Particle) -> None:
    color = hsla_color(PARTICLE_HUE, particle.brightness, particle.alpha)
    _draw_trail_line(surf, particle.trail.oldest, particle.position, color)


def render_scene(surf: pygame.Surface, scene: Scene, show_hud: bool = False) -> None:
    surf.fill(BACKGROUND_COLOR)

    for p in scene.projectiles:
        draw_projectile(surf, p)

    for e in scene.explosions:
        for particle in e.particles:
            draw_particle(surf, particle)

    if show_hud:
        stats = scene_stats(scene)
        draw_text(
            surf,
            f"Frame {stats.frame}  Lasers {stats.projectiles}  Explosions {stats.explosions}  Particles {stats.particles}",
            6, 6, HUD_TEXT_COLOR,
        )


def render_dot_scene(surf: pygame.Surface, scene: DotScene, show_hud: bool = False) -> None:
    # each dot repaints the whole canvas, so only the last one stays visible
    for dot in scene.dots:
        surf.fill(BACKGROUND_COLOR)
        pt = _safe_point(dot)
        if pt:
            surf.fill(DOT_COLOR, pygame.Rect(pt[0], pt[1], DOT_SIZE, DOT_SIZE))

    if show_hud:
        draw_text(surf, f"Frame {scene.frame}", 6, 6, HUD_TEXT_COLOR)


_cached_font = None


def draw_text(surface: pygame.Surface, text: str, x: int, y: int, color) -> None:
    global _cached_font
    if not pygame.font.get_init():
        # fonts from before a pygame.quit() are dead handles
        _cached_font = None
        pygame.font.init()
    if _cached_font is None:
        _cached_font = pygame.font.Font(None, 18)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))


def reset_font_cache() -> None:
    """Forget the HUD font; call before pygame.quit() so a later init builds a fresh one."""
    global _cached_font
    _cached_font = None
