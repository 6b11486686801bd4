import numpy as np

DTYPE = np.float64

DEFAULT_NORMAL = np.array([1, 1, 1], DTYPE) / np.sqrt(3)
DEFAULT_OFFSET = -1.0

NORMAL_EPSILON = 1e-12 # below this length a normal is considered degenerate
UNIT_TOLERANCE = 1e-9 # allowed deviation of |normal| from 1 when building a frame
PARALLEL_EPSILON = 1e-6 # |direction . normal| below this means the ray misses the plane
