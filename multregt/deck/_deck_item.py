"""A single named, typed item within a deck record."""

import logging

log = logging.getLogger(__name__)

from multregt.olio.exceptions import InvalidArgument


class DeckItem:
    """A named item of a keyword record, holding a typed value and whether that value was defaulted."""

    def __init__(self, name, value_type, token = None, default = None):
        """Create a DeckItem from a raw token, applying the item default where the token is missing.

        arguments:
           name (str): the item name, eg. 'SRC_REGION'
           value_type (type): one of int, float or str; the token is converted to this type
           token (str, optional): the raw text of the item; None indicates that the item was defaulted
           default (optional): the value returned by get() when the item was defaulted; if None, the
              item is required and a missing token raises InvalidArgument

        note:
           string values are held in upper case
        """

        self.name = name
        self.value_type = value_type
        self.defaulted = token is None
        if self.defaulted:
            if default is None:
                raise InvalidArgument(f'no value given for required deck item {name}')
            self.value = default
        else:
            try:
                self.value = value_type(token)
            except ValueError:
                raise InvalidArgument(f'invalid {value_type.__name__} value for deck item {name}: {token}')
        if value_type is str:
            self.value = self.value.upper()

    def get(self):
        """Returns the value of the item, which will be the default value if the item was defaulted."""
        return self.value

    def default_applied(self):
        """Returns True if no value was given for the item in the deck."""
        return self.defaulted

    def __repr__(self):
        return f'DeckItem({self.name}={self.value!r}{", defaulted" if self.defaulted else ""})'
