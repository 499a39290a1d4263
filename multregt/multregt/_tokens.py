"""Resolvers from the short text codes used in MULTREGT records to region categorizations and nnc behaviours."""

import logging

log = logging.getLogger(__name__)

from enum import Enum

from multregt.olio.exceptions import InvalidArgument


class RegionCategory(Enum):
    """The region categorization arrays which a MULTREGT record may be defined over."""

    OPERNUM = 'O'
    FLUXNUM = 'F'
    MULTNUM = 'M'

    @property
    def keyword(self):
        """The name of the region array, as used for region array lookups."""
        return self.name

    @property
    def code(self):
        """The single letter code used in the REGION_DEF item of a MULTREGT record."""
        return self.value


class NncBehaviour(Enum):
    """Which connections a multiplier applies to, with respect to ordinary (short) neighbour connections."""

    ALL = 'ALL'  # all connections
    NNC = 'NNC'  # non-neighbour connections only
    NONNC = 'NONNC'  # ordinary neighbour connections only
    NOAQUNNC = 'NOAQUNNC'  # all except aquifer connections; rejected by the validator


def region_category_from_code(code):
    """Returns the RegionCategory for a REGION_DEF code of 'O', 'F' or 'M'."""

    for category in RegionCategory:
        if code == category.code:
            return category
    raise InvalidArgument(f'unexpected region code: {code}; expected O, F or M')


def region_category_from_name(name):
    """Returns the RegionCategory for a region array name such as 'MULTNUM' (case insensitive).

    raises:
       InvalidArgument if name is not OPERNUM, FLUXNUM or MULTNUM
    """

    if isinstance(name, RegionCategory):
        return name
    try:
        return RegionCategory[name.upper()]
    except KeyError:
        raise InvalidArgument(f'unsupported region categorization: {name}; expected OPERNUM, FLUXNUM or MULTNUM')


def region_name_from_code(code):
    """Returns the region array name (OPERNUM, FLUXNUM or MULTNUM) for a REGION_DEF code of 'O', 'F' or 'M'.

    raises:
       InvalidArgument if code is not one of the three expected letters
    """

    return region_category_from_code(code).keyword


def nnc_behaviour_from_code(code):
    """Returns the NncBehaviour member for an NNC_MULT code of 'ALL', 'NNC', 'NONNC' or 'NOAQUNNC'.

    raises:
       InvalidArgument for any other code
    """

    try:
        return NncBehaviour(code)
    except ValueError:
        raise InvalidArgument(f'unexpected nnc behaviour code: {code}; expected ALL, NNC, NONNC or NOAQUNNC')
