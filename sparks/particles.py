#!/usr/bin/env python3
"""
Particle model: a fading point slowed by friction and pulled by gravity.

Particles are created in bursts by explosions. step_particle is pure; it returns
Expired once the particle's opacity is about to fall within one decay step of
zero, which drops it slightly before alpha actually reaches zero.
"""
import math
from dataclasses import replace

from .constants import (
    PARTICLE_BRIGHTNESS_RANGE,
    PARTICLE_DECAY_RANGE,
    PARTICLE_FRICTION,
    PARTICLE_GRAVITY,
    PARTICLE_SPEED_RANGE,
)
from .data_models import EXPIRED, Alive, Particle, Point2D, StepResult, TrailBuffer
from .sampling import RandomSource, sample


def create_particle(origin: Point2D, trail_capacity: int, rng: RandomSource) -> Particle:
    """
    Spawn a particle at origin heading in a random direction.

    Draw order from rng: angle, speed, brightness, decay.
    """
    angle = sample(rng, (0.0, 2.0 * math.pi))
    speed = sample(rng, PARTICLE_SPEED_RANGE)
    brightness = sample(rng, PARTICLE_BRIGHTNESS_RANGE)
    decay = sample(rng, PARTICLE_DECAY_RANGE)
    return Particle(
        x=origin[0],
        y=origin[1],
        trail=TrailBuffer.filled(origin, trail_capacity),
        angle=angle,
        speed=speed,
        friction=PARTICLE_FRICTION,
        gravity=PARTICLE_GRAVITY,
        brightness=brightness,
        alpha=1.0,
        decay=decay,
    )


def step_particle(p: Particle) -> StepResult[Particle]:
    trail = p.trail.push(p.position)
    speed = p.speed * p.friction
    alpha = p.alpha - p.decay
    if alpha <= p.decay:
        return EXPIRED
    return Alive(replace(
        p,
        x=p.x + math.cos(p.angle) * speed,
        y=p.y + math.sin(p.angle) * speed + p.gravity,
        trail=trail,
        speed=speed,
        alpha=alpha,
    ))
