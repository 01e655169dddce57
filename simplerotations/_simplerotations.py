# _simplerotations.py

# Licensed under the Apache License, Version 2.0 (the "License")

import logging
import math

from numpy import ascontiguousarray as np_ascontiguousarray
from numpy import allclose as np_allclose
from numpy import array as np_array
from numpy import array2string as np_array2string
from numpy import isfinite as np_isfinite
from numpy import shape as np_shape
from numpy import eye as np_eye
from numpy import float64 as np_float64
from numpy import ndarray
import numpy as np

from typing import Union, Optional, List, Tuple
from simplerotations import geometry as _geometry
from simplerotations import quaternion as _quaternion
from simplerotations import utils as _utils
from simplerotations.axis_angle import AxisAngle
from simplerotations.utils import DEGENERATE_TOL

_LOGGER: logging.Logger = logging.getLogger(__name__)

ArrayLike = Union[ndarray, List, Tuple]
SeedLike = Union[None, int, np.random.SeedSequence, np.random.Generator]

# preallocate the identity matrix
_EYE3 = np_eye(3, dtype=np_float64)


def _as_matrix(matrix: ArrayLike, name: str = "matrix") -> ndarray:
    m = np_ascontiguousarray(matrix, dtype=np_float64)
    if m.shape != (3, 3):
        raise ValueError(f"Invalid {name} shape: {m.shape}")
    return m


def _as_vector(vector: ArrayLike, size: int, name: str = "vector") -> ndarray:
    v = np_ascontiguousarray(vector, dtype=np_float64).reshape(-1)
    if v.shape != (size,):
        raise ValueError(
            f"Invalid {name} shape: {np_shape(vector)}, expected {size} elements")
    return v


def robust_acos(x: float) -> float:
    """
    acos(x) that maps round-off just past ±1 to 0 or π instead of NaN.
    """
    return _utils.robust_acos(float(x))


def skew(vector: ArrayLike) -> ndarray:
    """Cross-product matrix K of a 3-vector v, with K @ u == v × u."""
    return _utils.skew(_as_vector(vector, 3))


def is_rotation(matrix: ArrayLike, tol: float = 1e-6) -> bool:
    """True if `matrix` is orthonormal with determinant +1 within `tol`."""
    return bool(_utils.is_rotation(_as_matrix(matrix), tol))


def axang2rotm(axis: ArrayLike, angle: float) -> ndarray:
    """
    Convert an axis `axis` and angle `angle` (radians) to a 3x3 rotation matrix.

    The axis is normalized on a copy, so the caller's array is not modified.
    Returns the identity when `angle` is exactly 0, whatever the axis.
    """
    return _geometry.axang2rotm(_as_vector(axis, 3, "axis"), float(angle))


def rotm2axang(matrix: ArrayLike) -> Tuple[ndarray, float]:
    """
    Convert a rotation matrix to an axis-angle pair `(axis, angle)`.

    The angle is in [0, π]. At an angle of 0 or π the axis is undefined and
    comes back as NaN/inf or meaningless values; see `rotm2axang_checked`.
    """
    axis, angle = _geometry.rotm2axang(_as_matrix(matrix))
    return axis, float(angle)


def rotm2axang_checked(matrix: ArrayLike) -> AxisAngle:
    """
    Convert a rotation matrix to an `AxisAngle`, flagging an undefined axis.

    When sin(angle) is within ``DEGENERATE_TOL`` of zero (angle near 0 or π)
    the result has ``degenerate=True`` and ``axis=None``.

    Parameters:
        matrix (array_like): 3x3 rotation matrix.

    Returns:
        AxisAngle: the unit axis (or None) and the angle in radians.
    """
    axis, angle = rotm2axang(matrix)
    if abs(math.sin(angle)) < DEGENERATE_TOL or not np_isfinite(axis).all():
        _LOGGER.debug("Rotation angle %r leaves the axis undefined", angle)
        return AxisAngle(None, angle, degenerate=True)
    return AxisAngle(_utils.normalized(axis), angle)


def rotm2quat(matrix: ArrayLike) -> ndarray:
    """
    Convert a rotation matrix to a quaternion `[w, x, y, z]`.

    The identity gives exactly [1, 0, 0, 0]. Rotations by π inherit the
    undefined axis of `rotm2axang`. The result is not normalized.
    """
    return _geometry.rotm2quat(_as_matrix(matrix))


def quat2rotm(quaternion: ArrayLike) -> ndarray:
    """
    Convert a quaternion `[w, x, y, z]` to a 3x3 rotation matrix.

    No normalization is applied; a non-unit quaternion does not give a rotation.
    """
    return _geometry.quat2rotm(_as_vector(quaternion, 4, "quaternion"))


def randquaternion(rng: SeedLike = None) -> ndarray:
    """
    Uniformly distributed unit quaternion.

    Four standard normal samples normalized to unit length are uniform on the
    3-sphere.

    Parameters:
        rng: anything accepted by ``numpy.random.default_rng``: None, a seed,
            a SeedSequence or a Generator (which is advanced in place).

    Returns:
        ndarray: unit quaternion [w, x, y, z].
    """
    gen = np.random.default_rng(rng)
    return _quaternion.quatnormalize(gen.standard_normal(4))


def randrotation(rng: SeedLike = None) -> ndarray:
    """
    Uniformly distributed random rotation matrix via quaternion sampling.

    Parameters:
        rng: seed or Generator, see `randquaternion`.

    Returns:
        ndarray: 3x3 rotation matrix.
    """
    return _geometry.quat2rotm(randquaternion(rng))


def project2SO3(matrix: ArrayLike) -> ndarray:
    """
    Project the 3x3 matrix `matrix` to SO(3) via SVD.

    Returns the proper rotation closest to `matrix` in the Frobenius norm.
    """
    M = _as_matrix(matrix)
    if _utils.det3(M) < 0.0:
        _LOGGER.debug("Projecting a matrix with negative determinant onto SO(3)")
    return _geometry.project2SO3(M)


def roterror(R1: ArrayLike, R2: ArrayLike) -> float:
    """
    Angular difference in degrees between rotations `R1` and `R2`, in [0, 180].
    """
    return float(_geometry.roterror(_as_matrix(R1, "R1"), _as_matrix(R2, "R2")))


def omega1_quat(quaternion: ArrayLike) -> ndarray:
    """4x4 matrix with omega1_quat(a) @ b == a ⊗ b."""
    return _quaternion.omega1_quat(_as_vector(quaternion, 4, "quaternion"))


def omega1_pure(vector: ArrayLike) -> ndarray:
    """omega1 of the pure quaternion [0, vector]."""
    return _quaternion.omega1_pure(_as_vector(vector, 3))


def omega2_quat(quaternion: ArrayLike) -> ndarray:
    """4x4 matrix with omega2_quat(b) @ a == a ⊗ b."""
    return _quaternion.omega2_quat(_as_vector(quaternion, 4, "quaternion"))


def omega2_pure(vector: ArrayLike) -> ndarray:
    """omega2 of the pure quaternion [0, vector]."""
    return _quaternion.omega2_pure(_as_vector(vector, 3))


def omega1(q: ArrayLike) -> ndarray:
    """
    Quaternion product as matrix arithmetic: ``a ⊗ b == omega1(a) @ b``.

    A 3-element input is taken as the pure quaternion [0, q]. Also satisfies
    ``omega1(a⁻¹) == omega1(a).T`` for unit a.

    Raises:
        ValueError: if `q` has neither 3 nor 4 elements.
    """
    size = np.size(q)
    if size == 3:
        return omega1_pure(q)
    if size == 4:
        return omega1_quat(q)
    raise ValueError(f"Expected 3 or 4 elements, got shape {np_shape(q)}")


def omega2(q: ArrayLike) -> ndarray:
    """
    Quaternion product as matrix arithmetic: ``a ⊗ b == omega2(b) @ a``.

    A 3-element input is taken as the pure quaternion [0, q]. Also satisfies
    ``omega2(a⁻¹) == omega2(a).T`` for unit a.

    Raises:
        ValueError: if `q` has neither 3 nor 4 elements.
    """
    size = np.size(q)
    if size == 3:
        return omega2_pure(q)
    if size == 4:
        return omega2_quat(q)
    raise ValueError(f"Expected 3 or 4 elements, got shape {np_shape(q)}")


def quatmul(a: ArrayLike, b: ArrayLike) -> ndarray:
    """Hamilton product a ⊗ b of two quaternions [w, x, y, z]."""
    return _quaternion.quatmul(_as_vector(a, 4, "quaternion"), _as_vector(b, 4, "quaternion"))


def quatconj(quaternion: ArrayLike) -> ndarray:
    return _quaternion.quatconj(_as_vector(quaternion, 4, "quaternion"))


def quatinv(quaternion: ArrayLike) -> ndarray:
    return _quaternion.quatinv(_as_vector(quaternion, 4, "quaternion"))


def quatnormalize(quaternion: ArrayLike) -> ndarray:
    return _quaternion.quatnormalize(_as_vector(quaternion, 4, "quaternion"))


class Rotation:
    """
    A single 3D rotation stored as a 3x3 matrix.

    Attributes:
        matrix (ndarray): 3x3 rotation matrix.
    """
    __slots__ = ("matrix",)

    def __init__(self, matrix: Optional[ArrayLike] = None):
        if matrix is None:
            self.matrix = _EYE3.copy()
        else:
            matrix = np_array(matrix, dtype=np_float64)
            if matrix.shape != (3, 3):
                raise ValueError(f"Invalid matrix shape: {matrix.shape}")
            self.matrix = matrix

    @classmethod
    def identity(cls) -> "Rotation":
        return cls(_EYE3.copy())

    @classmethod
    def from_quaternion(cls, quaternion: ArrayLike) -> "Rotation":
        """
        Create a Rotation from a quaternion [w, x, y, z].

        Args:
            quaternion: 4-element array, expected to have unit norm.

        Returns:
            A new Rotation whose `matrix` is quat2rotm(quaternion).
        """
        return cls(quat2rotm(quaternion))

    @classmethod
    def from_axis_angle(cls, axis: ArrayLike, angle: float) -> "Rotation":
        return cls(axang2rotm(axis, angle))

    @classmethod
    def from_matrix(cls, matrix: ArrayLike, project: bool = False) -> "Rotation":
        """
        Create a Rotation from a 3x3 matrix.

        Args:
            matrix: 3x3 matrix.
            project: if True, replace `matrix` by its nearest proper rotation.

        Returns:
            A new Rotation.
        """
        if project:
            return cls(project2SO3(matrix))
        return cls(matrix)

    @classmethod
    def random(cls, rng: SeedLike = None) -> "Rotation":
        """Uniformly distributed random Rotation, see `randrotation`."""
        return cls(randrotation(rng))

    @property
    def quaternion(self) -> ndarray:
        """The quaternion [w, x, y, z] of this rotation (see `rotm2quat`)."""
        return rotm2quat(self.matrix)

    @property
    def axis_angle(self) -> AxisAngle:
        return rotm2axang_checked(self.matrix)

    def inverse(self) -> "Rotation":
        return self.__class__(self.matrix.T)

    def error_to(self, other: "Rotation") -> float:
        """Angular distance in degrees between this rotation and `other`."""
        return roterror(self.matrix, other.matrix)

    def is_valid(self, tol: float = 1e-6) -> bool:
        return is_rotation(self.matrix, tol)

    def __matmul__(self, other: Union["Rotation", ndarray]) -> Union["Rotation", ndarray]:
        """
        Compose with another Rotation (`other` applied first), or rotate an array.
        """
        if isinstance(other, ndarray):
            return self.matrix @ other

        if not isinstance(other, Rotation):
            return NotImplemented

        return self.__class__(self.matrix @ other.matrix)

    def __eq__(self, other: object) -> bool:
        """
        True if `other` is a Rotation and matrices are equal within a small tolerance.
        """
        if not isinstance(other, Rotation):
            return False
        return bool(np_allclose(self.matrix, other.matrix))

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        mat = np_array2string(self.matrix, precision=6, separator=', ')
        return f"{cls}(matrix=\n{mat}\n)"

    def __copy__(self) -> "Rotation":
        return self.__class__(self.matrix.copy())

    def __deepcopy__(self, memo) -> "Rotation":
        return self.__copy__()
