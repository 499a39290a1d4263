"""Functions for reading MULTREGT keyword occurrences from an ascii deck file."""

import logging

log = logging.getLogger(__name__)

import os

import multregt.olio.keyword_files as kf
from ._deck_record import DeckRecord, DeckKeyword, MULTREGT_ITEMS


def read_multregt_keywords(file_name, keyword = 'MULTREGT', comment_marker = '--'):
    """Reads an ascii deck file and returns a list of DeckKeyword objects, one per occurrence of the keyword.

    arguments:
       file_name (str): path of the ascii deck file (or include file)
       keyword (str, default 'MULTREGT'): the keyword to look for
       comment_marker (str, default '--'): text starting a comment, which runs to the end of the line

    returns:
       list of DeckKeyword, in the order the occurrences appear in the file; empty if there are none

    notes:
       each record is terminated by a slash and may span lines; the keyword is terminated by an empty
       record (a lone slash); repeat counts such as 2* default items
    """

    assert os.path.isfile(file_name), f'deck file not found: {file_name}'
    log.info(f'reading {keyword} data from deck file: {file_name}')

    keywords = []
    with open(file_name, 'r') as fp:
        while kf.find_keyword(fp, keyword, comment_marker = comment_marker):
            occurrence = DeckKeyword(keyword)
            while True:
                tokens = kf.read_record(fp, comment_marker = comment_marker)
                if len(tokens) == 0:
                    break
                occurrence.add_record(DeckRecord(tokens, item_schema = MULTREGT_ITEMS))
            log.debug(f'{keyword} occurrence {len(keywords) + 1} has {len(occurrence)} records')
            keywords.append(occurrence)

    return keywords
