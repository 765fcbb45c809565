#!/usr/bin/env python3
"""
Scene orchestration for the three animations.

Responsibilities
- Fireworks: step projectiles, turn each arrival into an explosion, age every explosion.
- Laser: step projectiles and drop arrivals without exploding them.
- Dot: drift a single dot diagonally from the canvas centre.

Every step function is a pure transition old scene -> new scene. The only outside input
is the random source used when an explosion is spawned.

Ordering notes (fireworks)
- Arrival is judged on the post-step projectile, so a projectile whose target equals its
  start explodes on its very first step.
- Explosions born this frame are stepped once before the frame is drawn.
- Explosions are never pruned, even after their last particle expires.
"""
import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from .constants import CANVAS_HEIGHT, CANVAS_WIDTH, DOT_STEP
from .data_models import DotScene, Point2D, Projectile, Scene, SceneStats
from .explosions import create_explosion, step_explosion
from .projectiles import create_projectile, has_arrived, step_projectile
from .sampling import RandomSource

logger = logging.getLogger("sparks")


def create_scene(rng: RandomSource) -> Scene:
    """Initial state: one projectile with a random target and no explosions."""
    return Scene(projectiles=(create_projectile(rng),), explosions=())


def _advance_projectiles(projectiles: Iterable[Projectile]) -> Tuple[List[Projectile], List[Projectile]]:
    """Step every projectile and split the results into (pending, arrived)."""
    pending: List[Projectile] = []
    arrived: List[Projectile] = []
    for p in projectiles:
        stepped = step_projectile(p)
        if has_arrived(stepped):
            arrived.append(stepped)
        else:
            pending.append(stepped)
    return pending, arrived


def step_scene(scene: Scene, rng: RandomSource) -> Scene:
    pending, arrived = _advance_projectiles(scene.projectiles)

    spawned = []
    for p in arrived:
        logger.debug(f"Frame {scene.frame + 1}: projectile arrived at ({p.x:.1f}, {p.y:.1f})")
        spawned.append(create_explosion(p.position, rng))

    explosions = tuple(step_explosion(e) for e in scene.explosions + tuple(spawned))
    return Scene(projectiles=tuple(pending), explosions=explosions, frame=scene.frame + 1)


def step_laser_scene(scene: Scene, rng: RandomSource) -> Scene:
    """Laser-only variant: arrived projectiles are dropped, nothing explodes."""
    pending, arrived = _advance_projectiles(scene.projectiles)
    for p in arrived:
        logger.debug(f"Frame {scene.frame + 1}: laser reached ({p.target.x:.1f}, {p.target.y:.1f})")
    return replace(scene, projectiles=tuple(pending), frame=scene.frame + 1)


def scene_stats(scene: Scene) -> SceneStats:
    return SceneStats(
        projectiles=len(scene.projectiles),
        explosions=len(scene.explosions),
        particles=sum(len(e.particles) for e in scene.explosions),
        frame=scene.frame,
    )


# ============================================================
# Drifting dot
# ============================================================

def create_dot_scene(rng: Optional[RandomSource] = None) -> DotScene:
    """The dot needs no randomness; rng is accepted so every variant shares one factory signature."""
    return DotScene(dots=(Point2D(CANVAS_WIDTH // 2, CANVAS_HEIGHT // 2),))


def step_dot(dot: Point2D) -> Point2D:
    """
    Move the dot DOT_STEP px right and down until it leaves the canvas.

    Both axes are gated on x; y compares x against the canvas height. With a square
    canvas the dot stops on both axes at the same frame.
    """
    return Point2D(
        dot.x + DOT_STEP if dot.x < CANVAS_WIDTH else dot.x,
        dot.y + DOT_STEP if dot.x < CANVAS_HEIGHT else dot.y,
    )


def step_dot_scene(scene: DotScene, rng: Optional[RandomSource] = None) -> DotScene:
    return DotScene(dots=tuple(step_dot(d) for d in scene.dots), frame=scene.frame + 1)
