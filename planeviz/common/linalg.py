from planeviz.common.settings import DTYPE, NORMAL_EPSILON, UNIT_TOLERANCE

import numpy as np
import transforms3d

def as_vector(v, dtype = DTYPE) -> np.ndarray:
    """Copies an array-like of 3 scalars into a fresh (3,) array"""
    a = np.array(v, dtype = dtype)
    if a.shape != (3,):
        raise ValueError(f"Expected a 3-vector, got shape {a.shape}")
    return a

def as_points(v, dtype = DTYPE) -> np.ndarray:
    """Nx3 view of v, a single point is promoted to a 1x3 matrix"""
    a = np.asarray(v, dtype = dtype)
    if a.ndim == 1:
        a = a[None, :]
    if a.ndim != 2 or a.shape[1] != 3:
        raise ValueError(f"Expected Nx3 points, got shape {a.shape}")
    return a

def as_plane_coordinates(uv, dtype = DTYPE) -> np.ndarray:
    """Nx2 view of uv, a single (u, v) pair is promoted to a 1x2 matrix"""
    a = np.asarray(uv, dtype = dtype)
    if a.ndim == 1 and a.shape[0] == 2:
        a = a[None, :]
    if a.ndim != 2 or a.shape[1] != 2:
        raise ValueError(f"Expected Nx2 plane coordinates, got shape {a.shape}")
    return a

def normalized(v):
    return v/np.linalg.norm(v)

def safe_normalized(v, eps = NORMAL_EPSILON):
    """Returns v/|v|, or None if |v| < eps"""
    # scale by the largest component first so huge components do not overflow the norm
    scale = np.max(np.abs(v))
    if not np.isfinite(scale) or scale == 0:
        return None
    w = v/scale
    norm = np.linalg.norm(w)
    if norm * scale < eps:
        return None
    return w/norm

def is_unit(v, tol = UNIT_TOLERANCE) -> bool:
    return abs(np.linalg.norm(v) - 1.0) <= tol

def tf_eye(dtype = DTYPE) -> np.ndarray:
    """4x4 Identity matrix"""
    return np.eye(4, dtype = dtype)

def RT_to_tf(R, T):
    tf = tf_eye(R.dtype)
    tf[:3, :3] = R
    tf[:3, 3] = T
    return tf

def tf_inv(transform:np.ndarray) -> np.ndarray:
    """
        Efficient 4x4 affine transform matrix invert
        Assumes orthonormal rotation matrix, and that transform[3,:] == [0,0,0,1]
    """
    R = transform[:3,:3]
    T = transform[:3, 3]

    inv_tf = np.zeros_like(transform)
    inv_tf[:3,:3] = R.T
    inv_tf[:3,3] = np.dot(-R.T, T)
    inv_tf[3,3] = 1

    return inv_tf

def map_points(m:np.ndarray, v:np.ndarray) ->  np.ndarray:
    """Apply a 4x4 transform on 3x1 point(s)

    Args:
        m: a 4x4 transform
        v: a (3,) point or Nx3 point matrix
    """
    if len(v.shape) == 1:
        return np.dot(m[:3, :3], v) + m[:3, 3]
    return (np.dot(m[:3, :3], v.T) + m[:3,3,None]).T

def rotation_between(a:np.ndarray, b:np.ndarray) -> np.ndarray:
    """Shortest-arc rotation quaternion (w, x, y, z) taking unit vector a onto unit vector b"""
    c = float(np.clip(np.dot(a, b), -1.0, 1.0))
    if c > 1.0 - UNIT_TOLERANCE:
        return np.array([1, 0, 0, 0], DTYPE)
    if c < -1.0 + UNIT_TOLERANCE:
        # half turn about any axis orthogonal to a
        axis = np.cross(a, [1, 0, 0])
        if np.linalg.norm(axis) < 1e-6:
            axis = np.cross(a, [0, 1, 0])
        return transforms3d.quaternions.axangle2quat(normalized(axis), np.pi)
    axis = normalized(np.cross(a, b))
    return transforms3d.quaternions.axangle2quat(axis, np.arccos(c))
