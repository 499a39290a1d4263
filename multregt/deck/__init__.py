"""Structured keyword records, as read from a simulator input deck."""

__all__ = ['DeckItem', 'DeckRecord', 'DeckKeyword', 'MULTREGT_ITEMS', 'read_multregt_keywords']

from ._deck_item import DeckItem
from ._deck_record import DeckRecord, DeckKeyword, MULTREGT_ITEMS
from ._read_deck import read_multregt_keywords

# Set "module" attribute of all public objects to this path.
for _name in __all__:
    _obj = eval(_name)
    if hasattr(_obj, "__module__"):
        _obj.__module__ = __name__
