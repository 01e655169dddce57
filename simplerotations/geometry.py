# geometry.py
import math
from numpy import float64 as np_float64
from numpy import ndarray
import numpy as np
from typing import Tuple
from numba import njit
from simplerotations.utils import robust_acos, trace3, skew, normalized

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)

_EYE3 = np.eye(3, dtype=np_float64)


@njit(cache=True, error_model="numpy")
def axang2rotm(axis: ndarray, angle: float) -> ndarray:
    """
    Convert an axis and angle to a 3x3 rotation matrix (Rodrigues' formula).

    The axis is normalized before use; the caller's array is left untouched.
    An angle of exactly zero returns the identity whatever the axis is.

    Parameters:
        axis (ndarray): 3-element rotation axis, any non-zero length.
        angle (float): rotation angle in radians.

    Returns:
        ndarray: 3x3 rotation matrix R = I + sin(θ)K + (1 - cos(θ))K².
    """
    if angle == 0.0:
        return _EYE3.copy()
    K = skew(normalized(axis))
    return _EYE3 + math.sin(angle) * K + (1.0 - math.cos(angle)) * (K @ K)


@njit(cache=True, error_model="numpy")
def rotm2axang(rotation: ndarray) -> Tuple[ndarray, float]:
    """
    Convert a rotation matrix to an axis-angle pair.

    The angle comes from the trace and is always in [0, pi]. The axis comes
    from the antisymmetric part divided by 2·sin(θ), so at θ = 0 or θ = pi it
    is undefined (NaN, inf or numerically meaningless values). Callers that
    need an axis in those cases must handle them, or use
    ``rotm2axang_checked``.

    Parameters:
        rotation (ndarray): 3x3 rotation matrix, assumed to be in SO(3).

    Returns:
        tuple[ndarray, float]: the axis and the angle in radians.
    """
    angle = robust_acos((trace3(rotation) - 1.0) / 2.0)
    s = 2.0 * math.sin(angle)
    axis = np.empty(3, dtype=np_float64)
    axis[0] = (rotation[2, 1] - rotation[1, 2]) / s
    axis[1] = (rotation[0, 2] - rotation[2, 0]) / s
    axis[2] = (rotation[1, 0] - rotation[0, 1]) / s
    return axis, angle


@njit(cache=True, error_model="numpy")
def rotm2quat(rotation: ndarray) -> ndarray:
    """
    Convert a rotation matrix to a quaternion [w, x, y, z].

    Goes through ``rotm2axang``, so a rotation by pi gives an unreliable
    vector part. The output is not normalized.
    """
    axis, angle = rotm2axang(rotation)
    q = np.empty(4, dtype=np_float64)
    q[0] = math.cos(angle / 2.0)
    if angle == 0.0:
        # axis is 0/0 here, the vector part is exactly zero
        q[1:] = 0.0
    else:
        s = math.sin(angle / 2.0)
        q[1] = axis[0] * s
        q[2] = axis[1] * s
        q[3] = axis[2] * s
    return q


@njit(cache=True)
def quat2rotm(quaternion: ndarray) -> ndarray:
    """
    Convert a quaternion [w, x, y, z] to a 3x3 rotation matrix.

    The quaternion is not normalized; a non-unit input gives a matrix that is
    not a rotation (scaled by |q|²).

    Parameters:
        quaternion (ndarray): A 4-element array, scalar part first.

    Returns:
        ndarray: A 3x3 matrix.
    """
    w, x, y, z = quaternion[0], quaternion[1], quaternion[2], quaternion[3]

    # precompute products
    ww = w*w
    xx = x*x
    yy = y*y
    zz = z*z
    xy = x*y
    xz = x*z
    yz = y*z
    wx = w*x
    wy = w*y
    wz = w*z

    R = np.empty((3, 3), dtype=np_float64)
    R[0, 0] = ww + xx - yy - zz
    R[0, 1] = 2*(xy - wz)
    R[0, 2] = 2*(xz + wy)

    R[1, 0] = 2*(xy + wz)
    R[1, 1] = ww - xx + yy - zz
    R[1, 2] = 2*(yz - wx)

    R[2, 0] = 2*(xz - wy)
    R[2, 1] = 2*(yz + wx)
    R[2, 2] = ww - xx - yy + zz
    return R


@njit(cache=True)
def project2SO3(M: ndarray) -> ndarray:
    """
    Nearest proper rotation to an arbitrary 3x3 matrix (Frobenius norm).

    * arbitrary scale, shear, or reflection in M
    * singular / nearly singular M   → best-fit R is still defined
    * det(R) enforced to +1 (proper rotation)
    """
    # M = U Σ Vᵀ
    U, _, Vt = np.linalg.svd(M)

    # U Vᵀ is orthogonal; det may be −1
    R = U @ Vt

    if np.linalg.det(R) < 0.0:
        # U · diag(1, 1, −1) · Vᵀ
        U[:, 2] *= -1.0
        R = U @ Vt

    return R


@njit(cache=True)
def roterror(R1: ndarray, R2: ndarray) -> float:
    """
    Angular distance in degrees between two rotations.

    This is the rotation angle of R1ᵀ R2, i.e. the geodesic distance on SO(3),
    always in [0, 180].
    """
    # trace(R1ᵀ R2) == Σ R1[i, j] R2[i, j]
    tr = 0.0
    for i in range(3):
        for j in range(3):
            tr += R1[i, j] * R2[i, j]
    angle = robust_acos((tr - 1.0) / 2.0)
    return angle * 180.0 / math.pi
