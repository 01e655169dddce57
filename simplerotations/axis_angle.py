from dataclasses import dataclass
from typing import Optional
from numpy import ndarray


@dataclass(frozen=True, eq=False)
class AxisAngle:
    """
    Axis-angle pair that records whether the axis is well defined.

    At an angle of 0 or pi the rotation axis cannot be recovered from the
    antisymmetric part of a rotation matrix. Such results carry
    ``degenerate=True`` and ``axis=None``; the angle is always valid.

    Attributes:
        axis (ndarray | None): unit rotation axis, or None if degenerate.
        angle (float): rotation angle in radians, in [0, pi].
        degenerate (bool): True when the axis is undefined.
    """
    axis: Optional[ndarray]
    angle: float
    degenerate: bool = False

    def __iter__(self):
        # allows ``axis, angle = result``
        yield self.axis
        yield self.angle
