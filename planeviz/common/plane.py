from planeviz.common import linalg
from planeviz.common.errors import DegenerateNormal
from planeviz.common.settings import DEFAULT_NORMAL, DEFAULT_OFFSET, DTYPE, NORMAL_EPSILON

import math
import numpy as np

'''
Plane API
a plane is defined by n . p + c = 0, n being a unit normal and c a signed
offset (the Hesse normal form). The plane passes through -c * n.

Two representations are supported:
    - Plane, a mutable state object that keeps its normal unit length
    - plane := np.array([a,b,c,d], dtype = ...), i.e. ax + by + cz + d = 0
'''

AXES = {'x': 0, 'y': 1, 'z': 2}

def axis_index(axis) -> int:
    """Maps 0, 1, 2 or 'x', 'y', 'z' (any case) to a component index"""
    if isinstance(axis, str):
        index = AXES.get(axis.lower())
    elif isinstance(axis, (int, np.integer)) and not isinstance(axis, bool):
        index = int(axis) if 0 <= axis <= 2 else None
    else:
        index = None

    if index is None:
        raise ValueError(f"Unknown axis {axis!r}, expected one of 0, 1, 2, 'x', 'y', 'z'")
    return index

class Plane():
    """Oriented plane in Hesse normal form, normal . p + offset = 0

    The normal is unit length whenever the plane can be observed: every
    mutation renormalizes before returning, and a mutation that would make
    the normal degenerate is rejected as a whole.
    """

    def __init__(self, normal = DEFAULT_NORMAL, offset:float = DEFAULT_OFFSET):
        n = linalg.safe_normalized(linalg.as_vector(normal))
        if n is None:
            raise DegenerateNormal(f"Cannot build a plane from normal {normal}")
        self._normal = n
        self._offset = 0.0
        self.set_offset(offset)

    @classmethod
    def from_array(cls, plane) -> 'Plane':
        """From the [a,b,c,d] form. Normalizes, scaling d accordingly"""
        p = np.asarray(plane, DTYPE)
        norm = np.linalg.norm(p[0:3])
        if norm < NORMAL_EPSILON:
            raise DegenerateNormal(f"Cannot build a plane from {plane}")
        return cls(p[0:3] / norm, p[3] / norm)

    @classmethod
    def from_point_normal(cls, point, normal) -> 'Plane':
        n = linalg.safe_normalized(linalg.as_vector(normal))
        if n is None:
            raise DegenerateNormal(f"Cannot build a plane from normal {normal}")
        return cls(n, -np.dot(n, linalg.as_vector(point)))

    @property
    def normal(self) -> np.ndarray:
        return self._normal.copy()

    @property
    def offset(self) -> float:
        return self._offset

    def set_normal_component(self, axis, value:float):
        """Sets one normal component, then renormalizes.

        Raises:
            DegenerateNormal: the resulting vector is (near) zero. The
                normal is left as it was.
            ValueError: unknown axis
        """
        candidate = self._normal.copy()
        candidate[axis_index(axis)] = value

        n = linalg.safe_normalized(candidate)
        if n is None:
            raise DegenerateNormal(f"Setting normal[{axis!r}] to {value} gives degenerate normal {candidate}")
        self._normal = n

    def set_offset(self, value:float):
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Plane offset must be finite, got {value}")
        self._offset = value

    def coplanar_point(self) -> np.ndarray:
        """The point of the plane closest to the world origin"""
        return self._normal * -self._offset

    def distance_to_point(self, point) -> float:
        """Signed distance, positive on the side the normal points to"""
        return float(np.dot(self._normal, point) + self._offset)

    def as_array(self) -> np.ndarray:
        return make_plane(self.coplanar_point(), self._normal)

    def copy(self) -> 'Plane':
        return Plane(self._normal, self._offset)

    def __eq__(self, other):
        if not isinstance(other, Plane):
            return NotImplemented
        return np.array_equal(self._normal, other._normal) and self._offset == other._offset

    def __repr__(self):
        return f"Plane(normal={self._normal.tolist()}, offset={self._offset})"

def make_plane(point, direction, dtype = DTYPE):
    p =  np.zeros((4,), dtype)
    p[0:3] = direction
    p[3] = -np.dot(direction, point)
    return p

def plane_normal(plane):
    return plane[0:3]

def plane_offset(plane):
    """The Hesse constant d of ax + by + cz + d = 0"""
    return plane[3]

def plane_point(plane):
    return plane_normal(plane) * -plane_offset(plane)

def plane_test(plane, points):
    """True for each point on the plane or behind it (opposite to the normal)"""
    return np.dot(linalg.as_points(points), plane_normal(plane)) + plane_offset(plane) <= 0
