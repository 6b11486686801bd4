from planeviz.common.errors import DegenerateNormal
from planeviz.common.frame import PlaneFrame, build_frame
from planeviz.common.intersection import Ray, intersect
from planeviz.common.logging_manager import LoggingManager
from planeviz.common.plane import Plane
from planeviz.common.settings import DTYPE
from planeviz.common.transform import PlanePoint2, embed_points, project
from planeviz.common.types.option import Option

from typing import Tuple

import numpy as np

class PlaneSession():
    """Owns the plane of an interactive session and the points recorded on it.

    Control handlers go through set_normal_component() and set_offset(),
    readers get copies. Recorded points are kept in plane coordinates: when
    the plane moves or turns they move with it, staying at the same (u, v)
    of the current frame.
    """

    def __init__(self, plane:Plane = None):
        self._plane = Plane() if plane is None else plane.copy()
        self._points = []

    @property
    def plane(self) -> Plane:
        return self._plane.copy()

    @property
    def points(self) -> Tuple[PlanePoint2, ...]:
        return tuple(self._points)

    def set_normal_component(self, axis, value:float) -> bool:
        """Returns False, leaving the normal unchanged, if the update would make it degenerate"""
        try:
            self._plane.set_normal_component(axis, value)
        except DegenerateNormal as e:
            LoggingManager.instance().warning(f"Ignoring normal update: {e}")
            return False
        return True

    def set_offset(self, value:float):
        self._plane.set_offset(value)

    def frame(self) -> PlaneFrame:
        return build_frame(self._plane)

    def record_point(self, ray:Ray, forward_only:bool = True) -> Option:
        """Records where ray hits the plane

        Returns:
            Option.some(PlanePoint2) of the recorded point, or Option.none()
            if the ray misses the plane (nothing is recorded then)
        """
        hit = intersect(ray, self._plane, forward_only)
        if hit.is_none():
            LoggingManager.instance().warning(f"{ray} does not hit {self._plane}, no point recorded")
            return hit

        frame = self.frame()
        return hit.map(lambda p: project(frame, p)).tee(self._points.append)

    def world_points(self) -> np.ndarray:
        """Nx3 world positions of the recorded points through the current frame, in recording order"""
        if not self._points:
            return np.zeros((0, 3), DTYPE)
        return embed_points(self.frame(), [p.as_array() for p in self._points])
