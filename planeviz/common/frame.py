from planeviz.common import linalg
from planeviz.common.errors import InvalidPlaneState
from planeviz.common.plane import Plane, plane_normal, plane_offset
from planeviz.common.settings import DTYPE

import numpy as np
import transforms3d

X_AXIS = np.array([1, 0, 0], DTYPE)
Y_AXIS = np.array([0, 1, 0], DTYPE)
X_AXIS.flags.writeable = False
Y_AXIS.flags.writeable = False

class PlaneFrame():
    """Orthonormal 2D coordinate system laid on a plane

    {basis_u, basis_v, normal} is right handed, basis_v = normal x basis_u.
    A frame is a snapshot: it does not follow later changes to the plane it
    was built from.
    """

    __slots__ = ('origin', 'basis_u', 'basis_v', 'normal')

    def __init__(self, origin:np.ndarray, basis_u:np.ndarray, basis_v:np.ndarray, normal:np.ndarray):
        self.origin = origin
        self.basis_u = basis_u
        self.basis_v = basis_v
        self.normal = normal

    def rotation(self) -> np.ndarray:
        """3x3 matrix whose columns are basis_u, basis_v, normal"""
        return np.column_stack([self.basis_u, self.basis_v, self.normal])

    def to_tf(self) -> np.ndarray:
        """4x4 transform from plane-local (u, v, height) to world coordinates"""
        return linalg.RT_to_tf(self.rotation(), self.origin)

    def from_world_tf(self) -> np.ndarray:
        """4x4 transform from world to plane-local (u, v, height) coordinates"""
        return linalg.tf_inv(self.to_tf())

    def quaternion(self) -> np.ndarray:
        """Orientation of the frame as a (w, x, y, z) quaternion"""
        return transforms3d.quaternions.mat2quat(self.rotation())

    def __repr__(self):
        return (f"PlaneFrame(origin={self.origin.tolist()}, basis_u={self.basis_u.tolist()}"
                f", basis_v={self.basis_v.tolist()})")

def _normal_and_offset(plane):
    if isinstance(plane, Plane):
        return plane.normal, plane.offset
    p = np.asarray(plane, DTYPE)
    if p.shape != (4,):
        raise InvalidPlaneState(f"Expected a Plane or an [a,b,c,d] array, got shape {p.shape}")
    return plane_normal(p).copy(), float(plane_offset(p))

def reference_axis(normal:np.ndarray) -> np.ndarray:
    """World axis crossed with the normal to get the first basis vector.

    Picks the axis matching the smaller of |nx| and |ny|, so it is never
    close to parallel to the normal. Where |nx| == |ny| the choice switches
    and the resulting basis rotates abruptly.
    """
    if abs(normal[0]) > abs(normal[1]):
        return Y_AXIS
    return X_AXIS

def build_frame(plane) -> PlaneFrame:
    """Derives the frame of a plane.

    Args:
        plane: a Plane, or an [a,b,c,d] array whose (a,b,c) is unit length
    Returns:
        the PlaneFrame; its origin is the point of the plane closest to the
        world origin
    Raises:
        InvalidPlaneState: the normal is degenerate or not unit length
    """
    normal, offset = _normal_and_offset(plane)

    if not np.all(np.isfinite(normal)) or not linalg.is_unit(normal):
        raise InvalidPlaneState(f"Plane normal {normal} is not unit length, renormalize before building a frame")

    origin = normal * -offset
    basis_u = linalg.normalized(np.cross(normal, reference_axis(normal)))
    basis_v = linalg.normalized(np.cross(normal, basis_u))

    return PlaneFrame(origin, basis_u, basis_v, normal)
