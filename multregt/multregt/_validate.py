"""Checks that a MULTREGT keyword occurrence only expresses supported semantics."""

import logging

log = logging.getLogger(__name__)

from multregt.olio.exceptions import InvalidArgument
from ._tokens import NncBehaviour, nnc_behaviour_from_code


def assert_keyword_supported(keyword):
    """Raises InvalidArgument if any record of the keyword occurrence is unsupported.

    arguments:
       keyword (DeckKeyword): one occurrence of the MULTREGT keyword

    raises:
       InvalidArgument if a record has explicit, equal source and target regions; if a record has an
       unrecognised NNC_MULT code; or if a record uses the NOAQUNNC behaviour

    note:
       all records are checked before any is expanded, so one bad record rejects the whole occurrence
    """

    for record in keyword:
        src_item = record.get_item('SRC_REGION')
        target_item = record.get_item('TARGET_REGION')
        nnc_behaviour = nnc_behaviour_from_code(record.get_item('NNC_MULT').get())

        if not src_item.default_applied() and not target_item.default_applied():
            if src_item.get() == target_item.get():
                raise InvalidArgument(f'self-referential region multiplier unsupported (region {src_item.get()})')

        if nnc_behaviour is NncBehaviour.NOAQUNNC:
            raise InvalidArgument('NOAQUNNC unsupported')
