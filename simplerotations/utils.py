# utils.py

import math
import numpy as np
from numpy import float64 as np_float64
from numpy import ndarray
from numba import njit
from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)

# relative tolerance used for approximate float comparisons (sqrt of double eps)
APPROX_RTOL = math.sqrt(np.finfo(np_float64).eps)

# |sin(angle)| below this marks the axis of an axis-angle pair as undefined
DEGENERATE_TOL = 1e-6

_EYE3 = np.eye(3, dtype=np_float64)


@njit(cache=True)
def is_approx(x: float, y: float) -> bool:
    """Approximate equality with relative tolerance ``APPROX_RTOL``."""
    if x == y:
        return True
    return abs(x - y) <= APPROX_RTOL * max(abs(x), abs(y))


@njit(cache=True)
def robust_acos(x: float) -> float:
    """
    Arc-cosine that tolerates round-off just outside [-1, 1].

    Values that overshoot the domain but are approximately +1 or -1 map to the
    limiting angle (0 or pi). Anything else outside the domain gives NaN.

    Parameters:
        x (float): cosine of the angle.

    Returns:
        float: angle in radians, in [0, pi] (or NaN).
    """
    if abs(x) <= 1.0:
        return math.acos(x)
    if is_approx(x, 1.0):
        return 0.0
    if is_approx(x, -1.0):
        return math.pi
    return np.nan


@njit(cache=True)
def trace3(M: ndarray) -> float:
    return M[0, 0] + M[1, 1] + M[2, 2]


@njit(cache=True)
def det3(M: ndarray) -> float:
    """Determinant of a 3 x 3 (faster than np.linalg.det for tiny mats)."""
    return (
        M[0, 0] * (M[1, 1] * M[2, 2] - M[1, 2] * M[2, 1])
        - M[0, 1] * (M[1, 0] * M[2, 2] - M[1, 2] * M[2, 0])
        + M[0, 2] * (M[1, 0] * M[2, 1] - M[1, 1] * M[2, 0])
    )


@njit(cache=True)
def skew(v: ndarray) -> ndarray:
    """
    Cross-product matrix K of a 3-vector, so that K @ u == cross(v, u).
    """
    K = np.zeros((3, 3), dtype=np_float64)
    K[0, 1] = -v[2]
    K[0, 2] = v[1]
    K[1, 0] = v[2]
    K[1, 2] = -v[0]
    K[2, 0] = -v[1]
    K[2, 1] = v[0]
    return K


@njit(cache=True, error_model="numpy")
def normalized(v: ndarray) -> ndarray:
    """Unit-length copy of v. A zero vector gives NaNs."""
    out = v.copy()
    n = 0.0
    for i in range(out.shape[0]):
        n += out[i] * out[i]
    n = math.sqrt(n)
    for i in range(out.shape[0]):
        out[i] /= n
    return out


@njit(cache=True)
def is_rotation(M: ndarray, tol=1e-6) -> bool:
    # must be orthonormal with det≈+1
    if not np.allclose(M @ M.T, _EYE3, atol=tol):
        return False
    return abs(det3(M) - 1.0) <= tol
