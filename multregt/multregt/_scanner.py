"""MultRegtScanner class and functions for building region multiplier rules and looking up face multipliers."""

import logging

log = logging.getLogger(__name__)

import pandas as pd

from ._expand import expand_keyword
from ._index import RuleIndex
from ._tokens import region_category_from_name
from ._validate import assert_keyword_supported


def build(region_props, keywords, default_region = None):
    """Returns a RuleIndex built from a sequence of MULTREGT keyword occurrences.

    arguments:
       region_props (RegionProperties): the region categorization arrays for the grid
       keywords (iterable of DeckKeyword): the MULTREGT occurrences, in deck order
       default_region (str or RegionCategory, optional): the categorization used by a record with no REGION_DEF
          when no rule has been generated before it; if None, the default region of region_props is used

    returns:
       RuleIndex holding the last rule for each (categorization, ordered region pair)

    raises:
       InvalidArgument for an unsupported or malformed record; LogicError if a rule refers to a region
       categorization which has no array in region_props

    notes:
       each occurrence is validated in full before it is expanded; the region categorization inherited by a
       record with a defaulted REGION_DEF carries over from one occurrence to the next
    """

    last_region = region_category_from_name(region_props.default_region if default_region is None else default_region)
    rules = []
    for keyword in keywords:
        assert_keyword_supported(keyword)
        keyword_rules, last_region = expand_keyword(keyword, region_props, last_region)
        rules += keyword_rules
    log.debug(f'{len(rules)} region multiplier rules generated')
    return RuleIndex(rules, region_props)


def is_short_neighbour(region_props, cell_a, cell_b):
    """Returns True if two cells, given by flattened index, differ by one step in exactly one of I and J.

    note:
       the K index is not considered
    """

    i_a, j_a, _ = region_props.ijk(cell_a)
    i_b, j_b, _ = region_props.ijk(cell_b)
    return (abs(i_a - i_b), abs(j_a - j_b)) in ((0, 1), (1, 0))


def lookup(index, cell_a, cell_b, face):
    """Returns the transmissibility multiplier for the connection between two cells across a given face.

    arguments:
       index (RuleIndex): as returned by build()
       cell_a, cell_b (int): flattened indices of the two cells
       face (FaceDir): the face of cell_a through which the connection is made

    returns:
       float: the multiplier of the first applicable rule, or 1.0 if no rule applies

    notes:
       region categorizations are tried in order of name; for each, the (region of a, region of b) pair
       is tried before the reversed pair; a rule matches only if its direction mask includes face; a matching
       rule with NNC behaviour does not apply to short neighbours, and one with NONNC only applies to them;
       a matching rule which does not apply ends the search in that categorization, without trying the reversed
       pair, and the search moves on to the next categorization
    """

    region_props = index.region_props
    for region in index.categories:
        region_a = region_props.iget(region.keyword, cell_a)
        region_b = region_props.iget(region.keyword, cell_b)
        rule = index.rule(region, (region_a, region_b))
        if rule is None or not rule.applies_to_face(face):
            rule = index.rule(region, (region_b, region_a))
            if rule is None or not rule.applies_to_face(face):
                continue
        if rule.applies_to_connection(is_short_neighbour(region_props, cell_a, cell_b)):
            return rule.trans_mult
    return 1.0


class MultRegtScanner:
    """Resolves region to region transmissibility multipliers for the cell faces of a structured grid."""

    def __init__(self, region_props, keywords, default_region = None):
        """Create a MultRegtScanner from MULTREGT keyword occurrences.

        arguments:
           region_props (RegionProperties): the region categorization arrays for the grid
           keywords (iterable of DeckKeyword): MULTREGT occurrences, in deck order
           default_region (str, optional): see build()

        returns:
           the new MultRegtScanner, which is read only once created

        :meta common:
        """

        self.region_props = region_props
        self.index = build(region_props, keywords, default_region = default_region)

    @property
    def rules(self):
        """All rules generated from the deck, in generation order, including those replaced by later rules."""
        return self.index.rules

    def region_multiplier(self, cell_a, cell_b, face):
        """Returns the multiplier for the connection between two cells (by flattened index) across face."""
        return lookup(self.index, cell_a, cell_b, face)

    def dataframe(self):
        """Returns a pandas dataframe with one row per active rule."""

        columns = ['region_name', 'src_region', 'target_region', 'trans_mult', 'directions', 'nnc_behaviour']
        rows = [(r.region_name, r.src_region, r.target_region, r.trans_mult, int(r.directions), r.nnc_behaviour.name)
                for r in self.index.active_rules()]
        return pd.DataFrame(rows, columns = columns)
