"""Basic functions for searching for keywords and reading records in an ascii deck such as an eclipse style data file.

Ascii file must already have been opened for reading before calling any of these functions.
"""

import logging

log = logging.getLogger(__name__)

from multregt.olio.exceptions import InvalidArgument

DEFAULT_TOKEN = None  # placeholder for a defaulted item within a tokenised record


def strip_trailing_comment(line, comment_marker = '--'):
    """Returns a copy of line with any trailing comment, and trailing newline, removed."""
    local_line = line.rstrip('\n\r')
    pos = local_line.find(comment_marker)
    if pos >= 0:
        local_line = local_line[:pos]
    return local_line


def unquote(word):
    """Returns word with one pair of surrounding single quotes removed, if present."""
    if len(word) >= 2 and word.startswith("'") and word.endswith("'"):
        return word[1:-1]
    return word


def find_keyword(ascii_file, keyword, comment_marker = '--'):
    """Looks for line starting with given keyword; file pointer is left at start of the line following the keyword.

    returns:
       True if the keyword was found, False if the end of file was reached first

    note:
       keyword matching is case insensitive and only the first eight characters are significant
    """
    wanted = keyword.upper()[:8]
    while True:
        line = ascii_file.readline()
        if len(line) == 0:
            return False  # end of file
        words = strip_trailing_comment(line, comment_marker = comment_marker).split()
        if len(words) > 0 and words[0].upper()[:8] == wanted:
            return True


def expand_tokens(words):
    """Returns a list of tokens with repeat counts (eg. 3*0.5) expanded and default markers (eg. 2*) replaced.

    arguments:
       words (list of str): raw whitespace separated words from a record, excluding the terminating slash

    returns:
       list with one entry per item; a defaulted item is represented by DEFAULT_TOKEN (None)

    note:
       single quotes are removed from quoted values, including repeated ones such as 2*'XY'; a fully
       quoted word containing an asterisk is not treated as a repeat count
    """

    tokens = []
    for word in words:
        if word.startswith("'") and word.endswith("'") and len(word) >= 2:
            tokens.append(word[1:-1])
            continue
        if '*' not in word:
            tokens.append(word)
            continue
        count_text, _, value = word.partition('*')
        if count_text == '':
            count = 1
        else:
            try:
                count = int(count_text)
            except ValueError:
                raise InvalidArgument(f'invalid repeat count in deck token: {word}')
            if count < 1:
                raise InvalidArgument(f'invalid repeat count in deck token: {word}')
        value = unquote(value)
        tokens += [value if value else DEFAULT_TOKEN] * count
    return tokens


def read_record(ascii_file, comment_marker = '--'):
    """Reads one slash terminated record, which may span several lines, and returns its expanded tokens.

    returns:
       list of tokens (see expand_tokens()); an empty list indicates an empty record, ie. a lone slash,
       which terminates the keyword

    raises:
       InvalidArgument if the end of file is reached before the terminating slash
    """

    words = []
    while True:
        line = ascii_file.readline()
        if len(line) == 0:
            raise InvalidArgument('end of file reached before record terminator (/)')
        text = strip_trailing_comment(line, comment_marker = comment_marker)
        slash = text.find('/')
        if slash >= 0:
            words += text[:slash].split()
            return expand_tokens(words)
        words += text.split()


# end of keyword_files module
