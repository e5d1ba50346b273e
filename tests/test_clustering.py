import numpy as np
import pytest

from kmeansplayground.model.clustering import (
    Point, Centroid, nearest_centroid_indices, assign_clusters,
    compute_centroid_targets, animate_centroids, has_converged
)
from kmeansplayground.model.geometry_primitives import Vector, Rect

BOUNDS = Rect(40.0, 30.0, 320.0, 240.0)


def centroids_at(*coords):
    return [Centroid.at(Vector(x, y)) for x, y in coords]


# --- Assignment ---

def test_nearest_centroid_indices():
    pts = np.array([[0.0, 0.0], [9.0, 9.0], [6.0, 7.0]])
    cents = np.array([[0.0, 0.0], [10.0, 10.0]])
    assert nearest_centroid_indices(pts, cents).tolist() == [0, 1, 1]


def test_nearest_centroid_indices_tie_goes_to_first():
    # (4, 6) is 52 away (squared) from both centroids
    pts = np.array([[4.0, 6.0], [6.0, 4.0]])
    cents = np.array([[0.0, 0.0], [10.0, 10.0]])
    assert nearest_centroid_indices(pts, cents).tolist() == [0, 0]
    assert nearest_centroid_indices(pts, cents[::-1]).tolist() == [0, 0]


def test_assign_picks_nearest_centroid():
    points = [Point(1.0, 1.0), Point(99.0, 98.0), Point(52.0, 10.0)]
    assign_clusters(points, centroids_at((0.0, 0.0), (100.0, 100.0), (50.0, 0.0)))
    assert [p.cluster for p in points] == [0, 1, 2]


def test_assign_tie_goes_to_lowest_index():
    points = [Point(100.0, 100.0)]
    assign_clusters(points, centroids_at((200.0, 200.0), (0.0, 0.0), (200.0, 200.0)))
    # (200, 200) at index 0 and (0, 0) at index 1 are equidistant
    assert points[0].cluster == 0


def test_assign_with_duplicate_centroids_prefers_first():
    points = [Point(3.0, 4.0)]
    assign_clusters(points, centroids_at((50.0, 50.0), (0.0, 0.0), (0.0, 0.0)))
    assert points[0].cluster == 1


def test_assign_without_centroids_is_noop():
    points = [Point(1.0, 2.0), Point(3.0, 4.0)]
    assign_clusters(points, [])
    assert all(p.cluster is None for p in points)


def test_assign_measures_against_position_not_target():
    c = Centroid(position=Vector(0.0, 0.0), target=Vector(1000.0, 1000.0))
    far = Centroid.at(Vector(500.0, 500.0))
    points = [Point(10.0, 10.0)]
    assign_clusters(points, [far, c])
    assert points[0].cluster == 1


def test_assign_overwrites_previous_cluster():
    points = [Point(1.0, 1.0, cluster=7)]
    assign_clusters(points, centroids_at((0.0, 0.0)))
    assert points[0].cluster == 0


def test_assign_empty_point_list():
    assign_clusters([], centroids_at((0.0, 0.0)))


# --- Target computation ---

def test_targets_are_cluster_means(rng):
    points = [Point(0.0, 0.0, 0), Point(10.0, 0.0, 0), Point(100.0, 50.0, 1)]
    targets = compute_centroid_targets(points, 2, BOUNDS, rng)
    assert targets[0] == Vector(5.0, 0.0)
    assert targets[1] == Vector(100.0, 50.0)


def test_empty_cluster_respawns_inside_bounds(rng):
    points = [Point(0.0, 0.0, 0)]
    for _ in range(200):
        targets = compute_centroid_targets(points, 3, BOUNDS, rng)
        for t in targets[1:]:
            assert BOUNDS.left <= t.x < BOUNDS.right
            assert BOUNDS.top <= t.y < BOUNDS.bottom


def test_empty_cluster_respawn_is_random(rng):
    a = compute_centroid_targets([], 1, BOUNDS, rng)[0]
    b = compute_centroid_targets([], 1, BOUNDS, rng)[0]
    assert a != b


def test_unassigned_and_stale_points_are_ignored(rng):
    points = [Point(10.0, 10.0, 0), Point(500.0, 500.0, None), Point(900.0, 900.0, 5)]
    targets = compute_centroid_targets(points, 1, BOUNDS, rng)
    assert targets == [Vector(10.0, 10.0)]


def test_targets_for_k_zero(rng):
    assert compute_centroid_targets([Point(1.0, 1.0)], 0, BOUNDS, rng) == []


# --- Animation ---

def test_animation_closes_ten_percent():
    c = Centroid(position=Vector(0.0, 0.0), target=Vector(100.0, -50.0))
    animate_centroids([c], 0.1)
    assert c.position.x == pytest.approx(10.0)
    assert c.position.y == pytest.approx(-5.0)


def test_animation_fixed_point():
    c = Centroid.at(Vector(123.25, 77.5))
    animate_centroids([c], 0.1)
    assert c.position == Vector(123.25, 77.5)


@pytest.mark.parametrize("alpha", [0.05, 0.1, 0.5, 0.9])
def test_animation_converges_monotonically(alpha):
    c = Centroid(position=Vector(0.0, 0.0), target=Vector(300.0, 200.0))
    previous = c.position.distance_to(c.target)
    while previous > 1e-6:
        animate_centroids([c], alpha)
        current = c.position.distance_to(c.target)
        assert current < previous
        previous = current


def test_animation_skips_centroids_without_target():
    c = Centroid(position=Vector(5.0, 5.0), target=None)
    animate_centroids([c], 0.1)
    assert c.position == Vector(5.0, 5.0)


# --- Convergence ---

def test_converged_within_threshold():
    cs = [Centroid(position=Vector(0.0, 0.0), target=Vector(0.6, 0.8))]
    assert has_converged(cs, 1.0)


def test_not_converged_when_any_centroid_is_far():
    cs = [Centroid.at(Vector(0.0, 0.0)), Centroid(position=Vector(0.0, 0.0), target=Vector(3.0, 0.0))]
    assert not has_converged(cs, 1.0)


def test_converged_without_centroids():
    assert has_converged([], 1.0)
