#!/usr/bin/env python3
"""
Explosion model: a fixed-size burst of particles sharing one origin.

An explosion is never removed by its own step. Once every particle has expired it
stays behind as an inert, empty record.
"""
import logging
from dataclasses import replace

from .constants import EXPLOSION_PARTICLE_COUNT, PARTICLE_TRAIL_LENGTH
from .data_models import Alive, Explosion, Point2D
from .particles import create_particle, step_particle
from .sampling import RandomSource

logger = logging.getLogger("sparks")


def create_explosion(origin: Point2D, rng: RandomSource) -> Explosion:
    origin = Point2D(origin[0], origin[1])
    particles = tuple(
        create_particle(origin, PARTICLE_TRAIL_LENGTH, rng)
        for _ in range(EXPLOSION_PARTICLE_COUNT)
    )
    logger.debug(f"Explosion spawned at ({origin.x:.1f}, {origin.y:.1f}) with {len(particles)} particles")
    return Explosion(origin=origin, particles=particles)


def step_explosion(e: Explosion) -> Explosion:
    """Advance every particle one frame, keeping survivors in their original order."""
    if not e.particles:
        return e
    survivors = []
    for particle in e.particles:
        result = step_particle(particle)
        if isinstance(result, Alive):
            survivors.append(result.value)
    return replace(e, particles=tuple(survivors))
