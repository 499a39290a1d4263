"""Deck records and keywords: ordered sequences of named items."""

import logging

log = logging.getLogger(__name__)

from multregt.olio.exceptions import InvalidArgument
from ._deck_item import DeckItem

# item name, type and default value for each item of a MULTREGT record, in deck order
MULTREGT_ITEMS = (
    ('SRC_REGION', int, -1),
    ('TARGET_REGION', int, -1),
    ('TRAN_MULT', float, None),  # required
    ('DIRECTIONS', str, 'XYZ'),
    ('NNC_MULT', str, 'ALL'),
    ('REGION_DEF', str, 'M'),
)


class DeckRecord:
    """One record of a keyword, giving access to its items by name."""

    def __init__(self, tokens, item_schema = MULTREGT_ITEMS):
        """Create a record from a list of tokens, one per item, with None for defaulted items.

        arguments:
           tokens (list): raw item tokens in deck order; a None entry, or a missing trailing entry,
              means the item was defaulted
           item_schema (tuple of (name, type, default) triplets, default MULTREGT_ITEMS): the item layout

        raises:
           InvalidArgument if there are more tokens than items, or a token cannot be converted
        """

        if len(tokens) > len(item_schema):
            raise InvalidArgument(f'too many items in deck record: {len(tokens)} given, at most {len(item_schema)}')
        self.items = {}
        for index, (name, value_type, default) in enumerate(item_schema):
            token = tokens[index] if index < len(tokens) else None
            self.items[name] = DeckItem(name, value_type, token = token, default = default)

    def get_item(self, name):
        """Returns the DeckItem with the given name."""
        return self.items[name]

    def __getitem__(self, name):
        return self.items[name]

    def __contains__(self, name):
        return name in self.items

    def __repr__(self):
        return 'DeckRecord(' + ', '.join(repr(item) for item in self.items.values()) + ')'


class DeckKeyword:
    """One occurrence of a keyword in a deck, holding its records in deck order."""

    def __init__(self, name, records = None):
        self.name = name.upper()
        self.records = [] if records is None else list(records)

    @classmethod
    def from_rows(cls, rows, name = 'MULTREGT', item_schema = MULTREGT_ITEMS):
        """Returns a new keyword built from python rows, where None marks a defaulted item.

        arguments:
           rows (iterable of tuples): item values in deck order; values may be of the target type or str;
              trailing items may be omitted, in which case they are defaulted
           name (str, default 'MULTREGT'): the keyword name
           item_schema (default MULTREGT_ITEMS): the item layout of each record

        example:
           DeckKeyword.from_rows([(1, 2, 0.5, 'XY', 'ALL', 'M'), (None, 3, 0.1)])
        """

        records = []
        for row in rows:
            tokens = [None if v is None else str(v) for v in row]
            records.append(DeckRecord(tokens, item_schema = item_schema))
        return cls(name, records)

    def add_record(self, record):
        """Appends a record to this keyword."""
        self.records.append(record)

    def __iter__(self):
        return iter(self.records)

    def __len__(self):
        return len(self.records)

    def __getitem__(self, index):
        return self.records[index]
