#!/usr/bin/env python3
"""
Projectile ("laser") model.

A projectile flies from its start point towards a fixed target along a constant
heading. Its speed grows geometrically (x1.05 per frame) without bound, so any
projectile whose target differs from its start arrives after finitely many
frames. step_projectile keeps moving past the target; the caller checks
has_arrived after each step and drops arrived projectiles.
"""
import math
from dataclasses import replace
from typing import Optional

from .constants import (
    CANVAS_CENTER,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    PROJECTILE_ACCELERATION,
    PROJECTILE_BRIGHTNESS_RANGE,
    PROJECTILE_START_SPEED,
    PROJECTILE_TRAIL_LENGTH,
    TARGET_RADIUS_MAX,
    TARGET_RADIUS_MIN,
    TARGET_RADIUS_STEP,
)
from .data_models import Point2D, Projectile, TrailBuffer
from .sampling import RandomSource, sample
from .vector_utils import distance, polar, vec_add


def create_projectile(rng: RandomSource,
                      start: Optional[Point2D] = None,
                      target: Optional[Point2D] = None) -> Projectile:
    """
    Create a projectile heading from start to target.

    Args:
        rng: Random source for the default target and the brightness.
        start: Launch point; defaults to the canvas centre.
        target: Destination; defaults to a uniform point in the top-left quarter
            of the canvas, x drawn before y.
    """
    start = Point2D(*(start if start is not None else CANVAS_CENTER))
    if target is None:
        target = Point2D(sample(rng, (0.0, CANVAS_WIDTH / 2)), sample(rng, (0.0, CANVAS_HEIGHT / 2)))
    else:
        target = Point2D(*target)
    brightness = sample(rng, PROJECTILE_BRIGHTNESS_RANGE)
    return Projectile(
        start=start,
        target=target,
        x=start.x,
        y=start.y,
        trail=TrailBuffer.filled(start, PROJECTILE_TRAIL_LENGTH),
        distance_to_target=distance(start, target),
        distance_traveled=0.0,
        angle=math.atan2(target.y - start.y, target.x - start.x),
        speed=PROJECTILE_START_SPEED,
        acceleration=PROJECTILE_ACCELERATION,
        brightness=brightness,
        target_radius=TARGET_RADIUS_MIN,
    )


def has_arrived(p: Projectile) -> bool:
    return p.distance_traveled >= p.distance_to_target


def next_target_radius(radius: float) -> float:
    """Sawtooth for the pulsing target ring: grow by a fixed step, wrap back to the minimum."""
    if radius < TARGET_RADIUS_MAX:
        return radius + TARGET_RADIUS_STEP
    return TARGET_RADIUS_MIN


def step_projectile(p: Projectile) -> Projectile:
    trail = p.trail.push(p.position)
    speed = p.speed * p.acceleration
    velocity = polar(p.angle, speed)
    x, y = vec_add(p.position, velocity)
    return replace(
        p,
        x=x,
        y=y,
        trail=trail,
        speed=speed,
        distance_traveled=distance(p.start, (x, y)),
        target_radius=next_target_radius(p.target_radius),
    )
