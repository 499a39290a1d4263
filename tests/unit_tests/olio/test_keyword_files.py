# test olio keyword_files functions

import io

import pytest

import multregt.olio.keyword_files as kf
from multregt.olio.exceptions import InvalidArgument


def test_strip_trailing_comment():
    assert kf.strip_trailing_comment('1 2 0.5 / -- comment\n') == '1 2 0.5 / '
    assert kf.strip_trailing_comment('MULTREGT\r\n') == 'MULTREGT'
    assert kf.strip_trailing_comment('-- all comment') == ''
    assert kf.strip_trailing_comment('1 2 ! not a comment', comment_marker = '!') == '1 2 '


@pytest.mark.parametrize('words, expected', [
    (['1', '2', '0.5'], ['1', '2', '0.5']),
    (['1*', '2'], [None, '2']),
    (['*', '2'], [None, '2']),
    (['3*'], [None, None, None]),
    (['2*0.5', 'X'], ['0.5', '0.5', 'X']),
    (["'XY'", "'M'"], ['XY', 'M']),
    (["2*'XY'"], ['XY', 'XY']),
    (["1*'F'", "'*'"], ['F', '*']),
    ([], []),
])
def test_expand_tokens(words, expected):
    assert kf.expand_tokens(words) == expected


@pytest.mark.parametrize('word', ['x*1', '0*', '-2*'])
def test_expand_tokens_bad_repeat(word):
    with pytest.raises(InvalidArgument):
        kf.expand_tokens([word])


def test_find_keyword_and_read_record():
    fp = io.StringIO('GRID\n-- MULTREGT in a comment\n\nmultregt\n 1 2\n 0.5 X / trailing\n/\n')
    assert kf.find_keyword(fp, 'MULTREGT')
    assert kf.read_record(fp) == ['1', '2', '0.5', 'X']
    assert kf.read_record(fp) == []
    assert not kf.find_keyword(fp, 'MULTREGT')


def test_read_record_unterminated():
    fp = io.StringIO(' 1 2 0.5\n')
    with pytest.raises(InvalidArgument):
        kf.read_record(fp)


def test_unquote():
    assert kf.unquote("'XY'") == 'XY'
    assert kf.unquote('XY') == 'XY'
    assert kf.unquote("'") == "'"
    assert kf.unquote("''") == ''
