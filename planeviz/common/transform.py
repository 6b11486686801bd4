from planeviz.common import linalg
from planeviz.common.frame import PlaneFrame
from planeviz.common.plane import Plane
from planeviz.common.settings import DTYPE

import numpy as np

class PlanePoint2():
    """A point in plane-local coordinates, world = origin + u*basis_u + v*basis_v

    Only meaningful together with a PlaneFrame. It is not tied to one, so
    the same (u, v) can be embedded through successive frames of a moving
    plane.
    """

    __slots__ = ('u', 'v')

    def __init__(self, u:float, v:float):
        object.__setattr__(self, 'u', float(u))
        object.__setattr__(self, 'v', float(v))

    def __setattr__(self, name, value):
        raise AttributeError("PlanePoint2 is immutable")

    def as_array(self) -> np.ndarray:
        return np.array([self.u, self.v], DTYPE)

    def __iter__(self):
        return iter((self.u, self.v))

    def __eq__(self, other):
        if not isinstance(other, PlanePoint2):
            return NotImplemented
        return (self.u, self.v) == (other.u, other.v)

    def __hash__(self):
        return hash((self.u, self.v))

    def __repr__(self):
        return f"PlanePoint2(u={self.u}, v={self.v})"

def project(frame:PlaneFrame, world_point) -> PlanePoint2:
    """Plane coordinates of the orthogonal projection of world_point on the frame's plane"""
    d = linalg.as_vector(world_point) - frame.origin
    return PlanePoint2(np.dot(d, frame.basis_u), np.dot(d, frame.basis_v))

def embed(frame:PlaneFrame, plane_point) -> np.ndarray:
    """World position of plane coordinates (a PlanePoint2 or any (u, v) pair)"""
    u, v = plane_point
    return frame.origin + u * frame.basis_u + v * frame.basis_v

def project_points(frame:PlaneFrame, world_points) -> np.ndarray:
    """Nx3 world points to Nx2 plane coordinates"""
    d = linalg.as_points(world_points) - frame.origin
    return np.c_[np.dot(d, frame.basis_u), np.dot(d, frame.basis_v)]

def embed_points(frame:PlaneFrame, plane_points) -> np.ndarray:
    """Nx2 plane coordinates to Nx3 world points"""
    uv = linalg.as_plane_coordinates(plane_points)
    return frame.origin + np.outer(uv[:, 0], frame.basis_u) + np.outer(uv[:, 1], frame.basis_v)

def distance_to_plane(plane:Plane, world_point) -> float:
    """Signed distance, positive on the side the normal points to"""
    return plane.distance_to_point(linalg.as_vector(world_point))

def snap_to_plane(plane:Plane, world_point) -> np.ndarray:
    """Moves world_point along the normal until it lies on the plane"""
    p = linalg.as_vector(world_point)
    return p - plane.normal * distance_to_plane(plane, p)

def snap_points(plane:Plane, world_points) -> np.ndarray:
    p = linalg.as_points(world_points)
    n = plane.normal
    return p - np.outer(np.dot(p, n) + plane.offset, n)
