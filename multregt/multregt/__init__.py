"""Region to region (MULTREGT) transmissibility multiplier rules and their lookup by cell face."""

__all__ = [
    'MultRegtScanner', 'MultiplierRule', 'RuleIndex', 'RegionCategory', 'NncBehaviour', 'build', 'lookup',
    'is_short_neighbour', 'face_multipliers', 'region_name_from_code', 'region_category_from_code',
    'region_category_from_name', 'nnc_behaviour_from_code', 'assert_keyword_supported', 'expand_keyword',
    'expand_record'
]

from ._tokens import RegionCategory, NncBehaviour, region_name_from_code, region_category_from_code,  \
    region_category_from_name,  \
    nnc_behaviour_from_code
from ._rule import MultiplierRule
from ._validate import assert_keyword_supported
from ._expand import expand_keyword, expand_record
from ._index import RuleIndex
from ._scanner import MultRegtScanner, build, lookup, is_short_neighbour
from ._face_multipliers import face_multipliers

# Set "module" attribute of all public objects to this path.
for _name in __all__:
    _obj = eval(_name)
    if hasattr(_obj, "__module__"):
        _obj.__module__ = __name__
