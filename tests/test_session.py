"""Tests for PlaneSession: control updates and recorded points."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.testing import assert_allclose

from planeviz.common.errors import PlaneWarning
from planeviz.common.intersection import Ray
from planeviz.common.plane import Plane
from planeviz.common.session import PlaneSession
from planeviz.common.transform import PlanePoint2


@pytest.fixture
def session(xy_plane: Plane) -> PlaneSession:
    return PlaneSession(xy_plane)


def test_default_session_plane() -> None:
    plane = PlaneSession().plane
    assert_allclose(plane.normal, np.ones(3) / np.sqrt(3))
    assert plane.offset == -1.0


def test_session_owns_a_copy(xy_plane: Plane, session: PlaneSession) -> None:
    xy_plane.set_offset(10.0)
    assert session.plane.offset == 0.0
    session.plane.set_offset(4.0)
    assert session.plane.offset == 0.0


def test_normal_update(session: PlaneSession) -> None:
    assert session.set_normal_component("x", 1.0)
    assert_allclose(session.plane.normal, np.array([1, 0, 1]) / np.sqrt(2))


def test_degenerate_update_is_ignored() -> None:
    session = PlaneSession(Plane((0, 1, 0), 0.0))
    assert session.set_normal_component("x", 0.0)
    assert not session.set_normal_component("y", 0.0)
    assert_allclose(session.plane.normal, [0, 1, 0])


def test_degenerate_update_warns_when_verbose(verbose_logging) -> None:
    session = PlaneSession(Plane((0, 0, 1), 0.0))
    with pytest.warns(PlaneWarning):
        assert not session.set_normal_component(2, 0.0)


def test_record_point(session: PlaneSession) -> None:
    hit = session.record_point(Ray([1, 2, 5], [0, 0, -1]))
    assert hit.get() == PlanePoint2(2.0, -1.0)
    assert session.points == (PlanePoint2(2.0, -1.0),)
    assert_allclose(session.world_points(), [[1, 2, 0]])


def test_missed_ray_records_nothing(session: PlaneSession) -> None:
    assert session.record_point(Ray([0, 0, 5], [1, 0, 0])).is_none()
    assert session.record_point(Ray([0, 0, 5], [0, 0, 1])).is_none()
    assert session.points == ()
    assert session.world_points().shape == (0, 3)


def test_recording_behind_origin_when_allowed(session: PlaneSession) -> None:
    assert session.record_point(Ray([0, 0, 5], [0, 0, 1]), forward_only=False).is_some()
    assert len(session.points) == 1


def test_points_follow_the_plane(session: PlaneSession) -> None:
    session.record_point(Ray([1, 2, 5], [0, 0, -1]))
    session.record_point(Ray([-3, 0, 5], [0, 0, -1]))

    session.set_offset(-3.0)
    assert_allclose(session.world_points(), [[1, 2, 3], [-3, 0, 3]])

    # tilting the plane keeps the points on it, at the same plane coordinates
    session.set_normal_component("y", 1.0)
    plane = session.plane
    world = session.world_points()
    assert_allclose(world @ plane.normal + plane.offset, [0, 0], atol=1e-9)
    frame = session.frame()
    assert_allclose((world - frame.origin) @ frame.basis_u, [2, 0], atol=1e-9)
    assert_allclose((world - frame.origin) @ frame.basis_v, [-1, 3], atol=1e-9)


def test_points_keep_recording_order(session: PlaneSession) -> None:
    for x in range(5):
        session.record_point(Ray([x, 0, 1], [0, 0, -1]))
    assert_allclose(session.world_points()[:, 0], [0, 1, 2, 3, 4], atol=1e-12)
