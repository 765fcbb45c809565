#!/usr/bin/env python3
"""
Registry of the animations the app can run.

Each variant bundles the scene factory, the per-frame step and the render pass that
belong together. Names are what the config file and the --variant flag accept.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from .renderer import render_dot_scene, render_scene
from .scene import (
    create_dot_scene,
    create_scene,
    scene_stats,
    step_dot_scene,
    step_laser_scene,
    step_scene,
)


@dataclass(frozen=True)
class Variant:
    name: str
    description: str
    create: Callable[[Any], Any]
    step: Callable[[Any, Any], Any]
    render: Callable[..., None]
    describe: Callable[[Any], Any]


def _describe_dots(scene) -> str:
    return ", ".join(f"dot=({d.x:.0f}, {d.y:.0f})" for d in scene.dots) or "no dots"


VARIANTS: Dict[str, Variant] = {
    "dot": Variant(
        name="dot",
        description="A single dot drifting diagonally from the canvas centre",
        create=create_dot_scene,
        step=step_dot_scene,
        render=render_dot_scene,
        describe=_describe_dots,
    ),
    "laser": Variant(
        name="laser",
        description="An accelerating laser flying to a pulsing target ring",
        create=create_scene,
        step=step_laser_scene,
        render=render_scene,
        describe=scene_stats,
    ),
    "fireworks": Variant(
        name="fireworks",
        description="Lasers that burst into fading particle explosions on arrival",
        create=create_scene,
        step=step_scene,
        render=render_scene,
        describe=scene_stats,
    ),
}

DEFAULT_VARIANT = "fireworks"


def variant_names() -> List[str]:
    return sorted(VARIANTS)


def get_variant(name: str) -> Variant:
    try:
        return VARIANTS[name]
    except KeyError:
        raise KeyError(f"Unknown variant {name!r}; expected one of {variant_names()}") from None
