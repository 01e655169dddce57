"""
SimpleRotations: closed-form conversions between rotation matrices, axis-angle pairs and unit quaternions,
plus random rotation sampling, projection onto SO(3), angular error and quaternion product matrices.

Quaternions are ordered [w, x, y, z] (scalar first). Angles are in radians, except `roterror` which returns degrees.
"""

__version__ = version = "0.1.0"

# exposing the public API of the package
from simplerotations._simplerotations import (
    Rotation,
    axang2rotm,
    rotm2axang,
    rotm2axang_checked,
    rotm2quat,
    quat2rotm,
    randquaternion,
    randrotation,
    project2SO3,
    roterror,
    robust_acos,
    skew,
    is_rotation,
    omega1,
    omega2,
    omega1_quat,
    omega1_pure,
    omega2_quat,
    omega2_pure,
    quatmul,
    quatconj,
    quatinv,
    quatnormalize,
)
from simplerotations.axis_angle import AxisAngle

__all__ = [
    "Rotation",
    "AxisAngle",
    "axang2rotm",
    "rotm2axang",
    "rotm2axang_checked",
    "rotm2quat",
    "quat2rotm",
    "randquaternion",
    "randrotation",
    "project2SO3",
    "roterror",
    "robust_acos",
    "skew",
    "is_rotation",
    "omega1",
    "omega2",
    "omega1_quat",
    "omega1_pure",
    "omega2_quat",
    "omega2_pure",
    "quatmul",
    "quatconj",
    "quatinv",
    "quatnormalize",
]
