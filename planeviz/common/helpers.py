from planeviz.common import linalg
from planeviz.common.frame import build_frame
from planeviz.common.plane import Plane
from planeviz.common.settings import DTYPE

import numpy as np

ARROW_UP = np.array([0, 1, 0], DTYPE)

class ArrowPose():
    """Placement of an arrow shaped axis helper

    Arrows are modeled pointing along +Y in their own space, quaternion()
    gives the rotation that lays them along direction.
    """

    __slots__ = ('origin', 'direction', 'length')

    def __init__(self, origin:np.ndarray, direction:np.ndarray, length:float = 1.0):
        self.origin = origin
        self.direction = direction
        self.length = float(length)

    def tip(self) -> np.ndarray:
        return self.origin + self.direction * self.length

    def quaternion(self) -> np.ndarray:
        return linalg.rotation_between(ARROW_UP, self.direction)

    def __repr__(self):
        return f"ArrowPose(origin={self.origin.tolist()}, direction={self.direction.tolist()}, length={self.length})"

def plane_helpers(plane:Plane) -> dict:
    """Arrow poses for the visual helpers of a plane

    Returns:
        a dict with
            'basis_u', 'basis_v': unit arrows at the world origin
            'normal': unit arrow standing on the plane origin
            'position': arrow from the world origin to the plane origin,
                of length |offset|
    """
    frame = build_frame(plane)
    world_origin = np.zeros(3, DTYPE)

    # a plane through the world origin has no position direction, fall back to the normal
    position_direction = linalg.safe_normalized(frame.origin)
    if position_direction is None:
        position_direction = frame.normal

    return {
        'basis_u': ArrowPose(world_origin.copy(), frame.basis_u),
        'basis_v': ArrowPose(world_origin.copy(), frame.basis_v),
        'normal': ArrowPose(frame.origin, frame.normal),
        'position': ArrowPose(world_origin.copy(), position_direction, abs(plane.offset)),
    }
