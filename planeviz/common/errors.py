class PlaneError(RuntimeError):
    """Base class for plane geometry errors"""

class DegenerateNormal(PlaneError):
    """Raised when a normal would collapse to a (near) zero vector.

    The plane that raised it still holds its last valid normal.
    """

class InvalidPlaneState(PlaneError):
    """Raised when a plane whose normal is not unit length reaches the frame builder.

    This is a caller contract violation: normals must be renormalized
    before the plane is read.
    """

class PlaneWarning(UserWarning):
    """Category of the warnings emitted for ignored plane updates"""
