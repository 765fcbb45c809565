#!/usr/bin/env python3
"""
Data models for the Sparks animations.

This module defines the value types shared between the simulation steps and the renderer.

Units and usage
- positions are in canvas pixels, speeds in pixels per frame, angles in radians.
- every model is a frozen dataclass; a step produces a new value via dataclasses.replace
  and never mutates the one it was given, so a scene snapshot can be read from another
  thread while the next frame is computed.
- trails store recent positions for drawing motion trails only; no simulation logic reads them.
"""
from dataclasses import dataclass
from typing import Generic, Iterator, NamedTuple, Tuple, TypeVar, Union


class Point2D(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class TrailBuffer:
    """
    Fixed-capacity history of positions, newest first.

    The length never changes after filling: push() inserts at the front and evicts
    the oldest point from the back.
    """
    points: Tuple[Point2D, ...]

    @classmethod
    def filled(cls, point: Point2D, capacity: int) -> "TrailBuffer":
        return cls(points=(Point2D(point[0], point[1]),) * capacity)

    @property
    def capacity(self) -> int:
        return len(self.points)

    @property
    def oldest(self) -> Point2D:
        return self.points[-1]

    def push(self, point: Point2D) -> "TrailBuffer":
        if not self.points:
            return self
        return TrailBuffer(points=(Point2D(point[0], point[1]),) + self.points[:-1])

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point2D]:
        return iter(self.points)


@dataclass(frozen=True)
class Particle:
    """
    A single fading point thrown out by an explosion.

    Fields:
    - x, y: current position
    - trail: recent positions (capacity 5 for explosion particles)
    - angle: heading in radians, fixed at creation
    - speed: pixels per frame, multiplied by friction every step
    - friction: speed multiplier per step
    - gravity: added to y every step
    - brightness: HSL lightness used when drawing
    - alpha: opacity in (0, 1]
    - decay: alpha lost per step
    """
    x: float
    y: float
    trail: TrailBuffer
    angle: float
    speed: float
    friction: float
    gravity: float
    brightness: float
    alpha: float
    decay: float

    @property
    def position(self) -> Point2D:
        return Point2D(self.x, self.y)


@dataclass(frozen=True)
class Projectile:
    """
    A laser flying in a straight line from start to target, accelerating every frame.

    distance_traveled is measured from start to the current position, so it equals the
    path length for straight-line motion. target_radius drives the pulsing ring drawn at
    the target.
    """
    start: Point2D
    target: Point2D
    x: float
    y: float
    trail: TrailBuffer
    distance_to_target: float
    distance_traveled: float
    angle: float
    speed: float
    acceleration: float
    brightness: float
    target_radius: float

    @property
    def position(self) -> Point2D:
        return Point2D(self.x, self.y)


@dataclass(frozen=True)
class Explosion:
    """A burst of particles spawned where a projectile arrived. May become empty."""
    origin: Point2D
    particles: Tuple[Particle, ...] = ()


@dataclass(frozen=True)
class Scene:
    """Top-level state for the laser and fireworks variants. Order is draw order."""
    projectiles: Tuple[Projectile, ...] = ()
    explosions: Tuple[Explosion, ...] = ()
    frame: int = 0


@dataclass(frozen=True)
class DotScene:
    """State for the drifting dot variant."""
    dots: Tuple[Point2D, ...] = ()
    frame: int = 0


T = TypeVar("T")


@dataclass(frozen=True)
class Alive(Generic[T]):
    """Step result carrying the updated value."""
    value: T


@dataclass(frozen=True)
class Expired:
    """Step result telling the owner to drop the entity."""


EXPIRED = Expired()

StepResult = Union[Alive[T], Expired]


@dataclass(frozen=True)
class SceneStats:
    projectiles: int = 0
    explosions: int = 0
    particles: int = 0
    frame: int = 0
