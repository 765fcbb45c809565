import pytest

from sparks.constants import CANVAS_CENTER, EXPLOSION_PARTICLE_COUNT, PROJECTILE_START_SPEED, PROJECTILE_ACCELERATION
from sparks.data_models import DotScene, Point2D, Scene, SceneStats
from sparks.projectiles import create_projectile, has_arrived
from sparks.scene import (
    create_dot_scene,
    create_scene,
    scene_stats,
    step_dot,
    step_dot_scene,
    step_laser_scene,
    step_scene,
)
from sparks.sampling import make_rng


def _run(scene, rng, frames, step=step_scene):
    states = [scene]
    for _ in range(frames):
        scene = step(scene, rng)
        states.append(scene)
    return states


def test_create_scene_has_one_projectile_and_no_explosions(rng):
    scene = create_scene(rng)
    assert len(scene.projectiles) == 1
    assert scene.explosions == ()
    assert scene.frame == 0
    assert scene.projectiles[0].start == Point2D(*CANVAS_CENTER)


def test_zero_distance_projectile_explodes_on_first_step(rng):
    p = create_projectile(rng, start=Point2D(100.0, 100.0), target=Point2D(100.0, 100.0))
    scene = Scene(projectiles=(p,))

    after = step_scene(scene, rng)

    assert after.projectiles == ()
    assert len(after.explosions) == 1
    # explosions spawn where the projectile ended up after its step
    first_move = PROJECTILE_START_SPEED * PROJECTILE_ACCELERATION
    assert after.explosions[0].origin.x == pytest.approx(100.0 + first_move)
    assert after.explosions[0].origin.y == pytest.approx(100.0)


def test_new_explosion_is_aged_in_the_frame_it_is_born(rng):
    p = create_projectile(rng, start=Point2D(100.0, 100.0), target=Point2D(100.0, 100.0))
    after = step_scene(Scene(projectiles=(p,)), rng)

    particles = after.explosions[0].particles
    assert len(particles) == EXPLOSION_PARTICLE_COUNT
    for particle in particles:
        assert particle.alpha == pytest.approx(1.0 - particle.decay)


def test_arrived_projectiles_are_dropped_and_others_kept(rng):
    arriving = create_projectile(rng, start=Point2D(10.0, 10.0), target=Point2D(10.0, 10.0))
    flying = create_projectile(rng, start=Point2D(0.0, 0.0), target=Point2D(490.0, 490.0))
    after = step_scene(Scene(projectiles=(arriving, flying)), rng)

    assert len(after.projectiles) == 1
    assert after.projectiles[0].target == Point2D(490.0, 490.0)
    assert len(after.explosions) == 1


def test_explosions_never_decrease_and_particles_never_increase(rng):
    projectiles = tuple(create_projectile(rng) for _ in range(5))
    states = _run(Scene(projectiles=projectiles), rng, 150)

    for before, after in zip(states, states[1:]):
        assert len(after.explosions) >= len(before.explosions)
        for old, new in zip(before.explosions, after.explosions):
            assert len(new.particles) <= len(old.particles)
            assert new.origin == old.origin

    final = states[-1]
    assert final.projectiles == ()
    assert len(final.explosions) == 5


def test_empty_explosions_stay_in_the_scene(rng):
    states = _run(create_scene(rng), rng, 200)
    final = states[-1]

    assert final.projectiles == ()
    assert len(final.explosions) == 1
    assert final.explosions[0].particles == ()


def test_step_scene_does_not_modify_input(rng):
    scene = create_scene(rng)
    projectile = scene.projectiles[0]
    step_scene(scene, rng)
    assert scene.projectiles[0] is projectile
    assert projectile.x == CANVAS_CENTER[0]
    assert scene.frame == 0


def test_frame_counter_increments(rng):
    states = _run(create_scene(rng), rng, 3)
    assert [s.frame for s in states] == [0, 1, 2, 3]


def test_same_seed_replays_identically():
    a_rng, b_rng = make_rng(7), make_rng(7)
    a = _run(create_scene(a_rng), a_rng, 40)[-1]
    b = _run(create_scene(b_rng), b_rng, 40)[-1]
    assert a == b


def test_laser_scene_drops_arrivals_without_exploding(rng):
    scene = create_scene(rng)
    for _ in range(200):
        scene = step_laser_scene(scene, rng)
        assert scene.explosions == ()
    assert scene.projectiles == ()
    assert scene.frame == 200


def test_laser_scene_keeps_projectile_until_arrival(rng):
    scene = Scene(projectiles=(create_projectile(rng, start=Point2D(0.0, 0.0), target=Point2D(400.0, 0.0)),))
    scene = step_laser_scene(scene, rng)
    assert len(scene.projectiles) == 1
    assert not has_arrived(scene.projectiles[0])


def test_scene_stats(rng):
    p = create_projectile(rng, start=Point2D(5.0, 5.0), target=Point2D(5.0, 5.0))
    far = create_projectile(rng, start=Point2D(0.0, 0.0), target=Point2D(400.0, 400.0))
    scene = step_scene(Scene(projectiles=(p, far)), rng)
    stats = scene_stats(scene)
    assert stats == SceneStats(projectiles=1, explosions=1, particles=30, frame=1)


def test_dot_starts_at_centre_and_drifts_diagonally():
    scene = create_dot_scene()
    assert scene.dots == (Point2D(250, 250),)

    scene = step_dot_scene(scene)
    assert scene.dots == (Point2D(253, 253),)
    assert scene.frame == 1


def test_dot_stops_once_past_the_edge():
    scene = create_dot_scene()
    for _ in range(200):
        scene = step_dot_scene(scene)
    assert scene.dots == (Point2D(502, 502),)


def test_dot_y_is_gated_on_x():
    assert step_dot(Point2D(600, 10)) == Point2D(600, 10)
    assert step_dot(Point2D(10, 600)) == Point2D(13, 603)


def test_dot_scene_is_a_value():
    scene = DotScene(dots=(Point2D(0, 0),))
    step_dot_scene(scene)
    assert scene.dots == (Point2D(0, 0),)
