"""The MultiplierRule class: one flat region pair multiplier, after expansion of wildcards."""

import logging

log = logging.getLogger(__name__)

from dataclasses import dataclass

from multregt.grid import FaceDir
from ._tokens import NncBehaviour, RegionCategory


@dataclass(frozen = True)
class MultiplierRule:
    """A transmissibility multiplier between two regions of one categorization, for a set of face directions."""

    src_region: int
    target_region: int
    trans_mult: float
    directions: FaceDir
    nnc_behaviour: NncBehaviour
    region: RegionCategory

    @property
    def region_name(self):
        """The name of the region array this rule is defined over, eg. 'MULTNUM'."""
        return self.region.keyword

    @property
    def pair(self):
        """The ordered (src_region, target_region) key of this rule."""
        return (self.src_region, self.target_region)

    def applies_to_face(self, face):
        """Returns True if face is included in this rule's direction mask."""
        return bool(self.directions & face)

    def applies_to_connection(self, short_neighbour):
        """Returns True if the multiplier applies to a connection, given whether it is a short neighbour pair."""

        if self.nnc_behaviour is NncBehaviour.NNC:
            return not short_neighbour
        if self.nnc_behaviour is NncBehaviour.NONNC:
            return short_neighbour
        return True
