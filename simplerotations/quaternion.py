# quaternion.py
#
# Quaternions are stored scalar first: q = [w, x, y, z].
import math
import numpy as np
from numpy import float64 as np_float64
from numpy import ndarray
from numba import njit
from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)


@njit(cache=True)
def _omega1(w: float, x: float, y: float, z: float) -> ndarray:
    out = np.empty((4, 4), dtype=np_float64)
    out[0, 0], out[0, 1], out[0, 2], out[0, 3] = w, -x, -y, -z
    out[1, 0], out[1, 1], out[1, 2], out[1, 3] = x, w, -z, y
    out[2, 0], out[2, 1], out[2, 2], out[2, 3] = y, z, w, -x
    out[3, 0], out[3, 1], out[3, 2], out[3, 3] = z, -y, x, w
    return out


@njit(cache=True)
def _omega2(w: float, x: float, y: float, z: float) -> ndarray:
    out = np.empty((4, 4), dtype=np_float64)
    out[0, 0], out[0, 1], out[0, 2], out[0, 3] = w, -x, -y, -z
    out[1, 0], out[1, 1], out[1, 2], out[1, 3] = x, w, z, -y
    out[2, 0], out[2, 1], out[2, 2], out[2, 3] = y, -z, w, x
    out[3, 0], out[3, 1], out[3, 2], out[3, 3] = z, y, -x, w
    return out


@njit(cache=True)
def omega1_quat(q: ndarray) -> ndarray:
    """
    Left-multiplication matrix of a quaternion.

    Obeys ``a ⊗ b == omega1_quat(a) @ b`` for any quaternions a, b, and
    ``omega1_quat(a⁻¹) == omega1_quat(a).T`` for unit a.

    Parameters:
        q (ndarray): 4-element quaternion [w, x, y, z].

    Returns:
        ndarray: 4x4 matrix.
    """
    return _omega1(q[0], q[1], q[2], q[3])


@njit(cache=True)
def omega1_pure(v: ndarray) -> ndarray:
    """Left-multiplication matrix of the pure quaternion [0, v]."""
    return _omega1(0.0, v[0], v[1], v[2])


@njit(cache=True)
def omega2_quat(q: ndarray) -> ndarray:
    """
    Right-multiplication matrix of a quaternion.

    Obeys ``a ⊗ b == omega2_quat(b) @ a`` for any quaternions a, b, and
    ``omega2_quat(b⁻¹) == omega2_quat(b).T`` for unit b.

    Parameters:
        q (ndarray): 4-element quaternion [w, x, y, z].

    Returns:
        ndarray: 4x4 matrix.
    """
    return _omega2(q[0], q[1], q[2], q[3])


@njit(cache=True)
def omega2_pure(v: ndarray) -> ndarray:
    """Right-multiplication matrix of the pure quaternion [0, v]."""
    return _omega2(0.0, v[0], v[1], v[2])


@njit(cache=True)
def quatmul(a: ndarray, b: ndarray) -> ndarray:
    """Hamilton product a ⊗ b."""
    aw, ax, ay, az = a[0], a[1], a[2], a[3]
    bw, bx, by, bz = b[0], b[1], b[2], b[3]
    out = np.empty(4, dtype=np_float64)
    out[0] = aw*bw - ax*bx - ay*by - az*bz
    out[1] = aw*bx + ax*bw + ay*bz - az*by
    out[2] = aw*by - ax*bz + ay*bw + az*bx
    out[3] = aw*bz + ax*by - ay*bx + az*bw
    return out


@njit(cache=True)
def quatconj(q: ndarray) -> ndarray:
    out = np.empty(4, dtype=np_float64)
    out[0] = q[0]
    out[1] = -q[1]
    out[2] = -q[2]
    out[3] = -q[3]
    return out


@njit(cache=True, error_model="numpy")
def quatinv(q: ndarray) -> ndarray:
    """Inverse conj(q) / |q|². Equals the conjugate for unit quaternions."""
    n2 = q[0]*q[0] + q[1]*q[1] + q[2]*q[2] + q[3]*q[3]
    out = quatconj(q)
    for i in range(4):
        out[i] /= n2
    return out


@njit(cache=True, error_model="numpy")
def quatnormalize(q: ndarray) -> ndarray:
    n = math.sqrt(q[0]*q[0] + q[1]*q[1] + q[2]*q[2] + q[3]*q[3])
    out = np.empty(4, dtype=np_float64)
    for i in range(4):
        out[i] = q[i] / n
    return out
