"""Cell face directions for a structured grid, held as bit flags."""

import logging

log = logging.getLogger(__name__)

from enum import IntFlag

from multregt.olio.exceptions import InvalidArgument


class FaceDir(IntFlag):
    """The six axis aligned faces of a structured grid cell; members may be combined into a direction mask."""

    XPlus = 1
    XMinus = 2
    YPlus = 4
    YMinus = 8
    ZPlus = 16
    ZMinus = 32

    @classmethod
    def none(cls):
        """Returns an empty direction mask."""
        return cls(0)

    @classmethod
    def from_multregt_string(cls, directions):
        """Returns the direction mask for a MULTREGT style axis token such as 'X', 'XY' or 'XYZ'.

        arguments:
           directions (str): a combination of the axis letters X, Y & Z, each at most once and in that order

        returns:
           FaceDir mask including both the plus and minus faces of each axis named

        raises:
           InvalidArgument if the token is not one of X, Y, Z, XY, XZ, YZ or XYZ
        """

        token = directions.strip().upper()
        if token not in ('X', 'Y', 'Z', 'XY', 'XZ', 'YZ', 'XYZ'):
            raise InvalidArgument(f'invalid direction string: {directions}; expected X, Y, Z, XY, XZ, YZ or XYZ')
        mask = cls.none()
        if 'X' in token:
            mask |= cls.XPlus | cls.XMinus
        if 'Y' in token:
            mask |= cls.YPlus | cls.YMinus
        if 'Z' in token:
            mask |= cls.ZPlus | cls.ZMinus
        return mask

    @classmethod
    def plus_for_axis(cls, axis):
        """Returns the plus face for axis given as 'I', 'J' or 'K' (or 'X', 'Y', 'Z')."""
        return {'I': cls.XPlus, 'X': cls.XPlus, 'J': cls.YPlus, 'Y': cls.YPlus, 'K': cls.ZPlus, 'Z': cls.ZPlus}[axis]
