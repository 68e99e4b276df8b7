""" Tests for xctype.ctype classification predicates. """
import string

import pytest

from xctype import ctype
from xctype.ctype import (is_alnum, is_alpha, is_cntrl, is_digit, is_graph,
                          is_lower, is_print, is_punct, is_space, is_upper,
                          is_xdigit, classify, categories_of, int_to_text,
                          CATEGORIES, CATEGORY_NAMES, PREDICATES)
from xctype.exception import CtypeError, InvalidInput, UnknownCategory


# -------------------------
# Empty and membership
# -------------------------

@pytest.mark.parametrize('name', CATEGORY_NAMES)
def test_empty_never_matches(name):
    assert PREDICATES[name]('') is False
    assert PREDICATES[name](b'') is False
    assert classify(name, '') is False


@pytest.mark.parametrize('name', CATEGORY_NAMES)
def test_whole_charset_matches(name):
    text = ''.join(sorted(CATEGORIES[name]))
    assert PREDICATES[name](text) is True


@pytest.mark.parametrize('name', CATEGORY_NAMES)
def test_one_foreign_character_fails(name):
    charset = CATEGORIES[name]
    foreign = next(chr(num) for num in range(256) if chr(num) not in charset)
    text = ''.join(sorted(charset))
    assert PREDICATES[name](text + foreign) is False
    assert PREDICATES[name](foreign + text) is False


@pytest.mark.parametrize('name', CATEGORY_NAMES)
def test_repeated_calls_agree(name):
    predicate = PREDICATES[name]
    results = [predicate(value)
               for value in ('abc', 'ABC', '123', ' \t', '!?', '\x00')] * 2
    assert results[:6] == results[6:]


def test_examples():
    assert is_alnum('AbCd1zyZ9')
    assert not is_alnum('foo!#$bar')
    assert is_alpha('KjgWZC')
    assert not is_alpha('arf12')
    assert is_cntrl('\n\r\t')
    assert not is_cntrl('arf12')
    assert is_digit('1820.20') is False
    assert is_digit('10002')
    assert is_graph('arf12')
    assert not is_graph('asdf\n\r\t')
    assert is_lower('aac')
    assert not is_lower('Qsdf')
    assert is_print('arf12 ')
    assert not is_print('asdf\n\r\t')
    assert is_punct('*&$()')
    assert not is_punct('ABasdk!@!$#')
    assert is_space('\n\r\t\x0b\x0c ')
    assert not is_space('\narf\n')
    assert is_upper('LMNSDO')
    assert not is_upper('AKLWC21')
    assert is_xdigit('AB10BC99')
    assert not is_xdigit('AR1012')


def test_space_is_ascii_only():
    # str.isspace() accepts these, ctype does not.
    assert '\x1c\x85\xa0\u2003'.isspace()
    for char in '\x1c\x85\xa0\u2003':
        assert is_space(char) is False


def test_wide_characters_never_match():
    for name in CATEGORY_NAMES:
        assert PREDICATES[name]('é') is False
        assert PREDICATES[name]('あ') is False


def test_charsets():
    assert CATEGORIES['punct'] == frozenset(
        [chr(num) for num in range(0x21, 0x30)] +
        [chr(num) for num in range(0x3a, 0x41)] +
        [chr(num) for num in range(0x5b, 0x61)] +
        [chr(num) for num in range(0x7b, 0x7f)])
    assert CATEGORIES['graph'] == frozenset(
        chr(num) for num in range(0x21, 0x7f))
    assert CATEGORIES['print'] == CATEGORIES['graph'] | frozenset(' ')
    assert CATEGORIES['cntrl'] == frozenset(
        [chr(num) for num in range(0x20)] + ['\x7f'])
    assert CATEGORIES['xdigit'] == frozenset('0123456789ABCDEFabcdef')
    assert sorted(CATEGORIES) == sorted(CATEGORY_NAMES)
    assert sorted(PREDICATES) == sorted(CATEGORY_NAMES)


# -------------------------
# Reference table, code points 0-255
# -------------------------

@pytest.mark.parametrize('num', range(256))
def test_codepoint_against_curses_ascii(num):
    curses_ascii = pytest.importorskip('curses.ascii')
    for name in CATEGORY_NAMES:
        expected = bool(getattr(curses_ascii, 'is' + name)(num))
        assert PREDICATES[name](num) is expected, (name, num)
        assert PREDICATES[name](chr(num)) is expected, (name, num)
        assert PREDICATES[name](bytes((num,))) is expected, (name, num)


# -------------------------
# Numeric normalization
# -------------------------

def test_int_is_character():
    assert is_alpha(65) is True
    assert is_digit(65) is False
    assert is_digit(48) is True
    assert is_space(32) is True
    assert int_to_text(65) == 'A'
    assert int_to_text(0) == '\x00'
    assert int_to_text(255) == '\xff'


def test_negative_int_wraps():
    assert int_to_text(-1) == '\xff'
    assert int_to_text(-128) == '\x80'
    for name in CATEGORY_NAMES:
        assert PREDICATES[name](-1) is PREDICATES[name]('\xff')
        assert PREDICATES[name](-1) is PREDICATES[name](b'\xff')
    # -191 + 256 = 65 would be 'A', but -191 is out of range
    assert int_to_text(-191) == '-191'


def test_int_out_of_range_is_digits():
    assert int_to_text(256) == '256'
    assert int_to_text(300) == '300'
    assert int_to_text(-129) == '-129'
    assert is_digit(300) is True
    assert is_alpha(300) is False
    assert is_xdigit(1000) is True
    assert is_digit(-129) is False
    assert is_graph(-129) is True


def test_text_unchanged():
    assert int_to_text('65') == '65'
    assert int_to_text(b'A\xff') == 'A\xff'
    assert int_to_text(bytearray(b'abc')) == 'abc'
    assert is_digit('65') is True


@pytest.mark.parametrize('value', [None, 1.5, True, False, ['a'], object()])
def test_invalid_input(value):
    with pytest.raises(InvalidInput) as exc_info:
        is_alnum(value)
    assert exc_info.value.value is value
    assert isinstance(exc_info.value, TypeError)
    assert isinstance(exc_info.value, CtypeError)


def test_unknown_category():
    with pytest.raises(UnknownCategory) as exc_info:
        classify('blank', ' ')
    assert exc_info.value.category == 'blank'
    assert isinstance(exc_info.value, KeyError)
    assert 'blank' in str(exc_info.value)


# -------------------------
# categories_of
# -------------------------

def test_categories_of():
    assert categories_of('a') == (
        'alnum', 'alpha', 'graph', 'lower', 'print', 'xdigit')
    assert categories_of(' ') == ('print', 'space')
    assert categories_of('\t') == ('cntrl', 'space')
    assert categories_of(300) == (
        'alnum', 'digit', 'graph', 'print', 'xdigit')
    assert categories_of('') == ()
    assert categories_of(-1) == ()


def test_punctuation_is_graph_not_alnum():
    for char in string.punctuation:
        assert categories_of(char) == ('graph', 'print', 'punct')


def test_package_exports():
    import xctype
    for name in xctype.__all__:
        assert hasattr(xctype, name), name
    assert xctype.is_print is ctype.is_print
