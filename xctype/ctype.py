"""
Locale-independent character classification for xctype.

Each predicate answers whether *every* character of its argument belongs
to one fixed ASCII character set, in the manner of ``<ctype.h>``::

    >>> is_alnum('abc123')
    True
    >>> is_alnum('')
    False

Integer arguments are interpreted the way legacy single-byte ``ctype``
functions do, see :func:`int_to_text`::

    >>> is_alpha(65), is_digit(65), is_digit(300)
    (True, False, True)
"""
import string

# local
from xctype.exception import InvalidInput, UnknownCategory

#: order categories are displayed and reported in.
CATEGORY_NAMES = ('alnum', 'alpha', 'cntrl', 'digit', 'graph', 'lower',
                  'print', 'punct', 'space', 'upper', 'xdigit')

_CNTRL = frozenset(chr(num) for num in range(0x20)) | frozenset('\x7f')
_PRINT = frozenset(chr(num) for num in range(0x20, 0x7f))

#: A mapping of category name to the set of characters it accepts.
CATEGORIES = {
    'alnum': frozenset(string.ascii_letters + string.digits),
    'alpha': frozenset(string.ascii_letters),
    'cntrl': _CNTRL,
    'digit': frozenset(string.digits),
    'graph': _PRINT - frozenset(' '),
    'lower': frozenset(string.ascii_lowercase),
    'print': _PRINT,
    'punct': frozenset(string.punctuation),
    # not str.isspace(), which also accepts unicode separators
    'space': frozenset(' \t\n\r\f\v'),
    'upper': frozenset(string.ascii_uppercase),
    'xdigit': frozenset(string.hexdigits),
}


def int_to_text(value):
    """
    Return the text that ``value`` should be classified as.

    If an integer between -128 and 255 inclusive is given, it is
    interpreted as the code point of a single character (negative values
    have 256 added, reaching the extended single-byte range).  Any other
    integer is interpreted as a string of its decimal digits, so that
    ``65`` becomes ``'A'``, but ``300`` becomes ``'300'``.

    Byte strings are decoded as iso8859-1, one character per byte.
    Text is returned unchanged.

    :param value: text, byte string, or integer.
    :rtype: str
    :raises InvalidInput: ``value`` is of any other type, including bool.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return value.decode('iso8859-1')
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(value)
    if value < -128 or value > 255:
        return str(value)
    if value < 0:
        value += 256
    return chr(value)


def classify(category, value):
    """
    Return whether every character of ``value`` belongs to ``category``.

    :param str category: any value of :py:const:`CATEGORY_NAMES`.
    :param value: text, byte string, or integer, see :func:`int_to_text`.
    :rtype: bool
    :raises UnknownCategory: ``category`` is not a known category name.
    """
    try:
        charset = CATEGORIES[category]
    except KeyError:
        raise UnknownCategory(category)
    text = int_to_text(value)
    # issuperset() stops at the first character outside of charset
    return bool(text) and charset.issuperset(text)


def is_alnum(value):
    """ Return True if every character is a letter or a digit. """
    return classify('alnum', value)


def is_alpha(value):
    """ Return True if every character is a letter. """
    return classify('alpha', value)


def is_cntrl(value):
    """ Return True if every character is a control character. """
    return classify('cntrl', value)


def is_digit(value):
    """ Return True if every character is a decimal digit. """
    return classify('digit', value)


def is_graph(value):
    """
    Return True if every character is printable and creates visible output.

    Unlike :func:`is_print`, the space character is not accepted.
    """
    return classify('graph', value)


def is_lower(value):
    """ Return True if every character is a lowercase letter. """
    return classify('lower', value)


def is_print(value):
    """
    Return True if every character will actually create output.

    The space character is accepted, control characters and anything
    beyond ``'~'`` (0x7e) are not.
    """
    return classify('print', value)


def is_punct(value):
    """ Return True if every character is printable, not alnum or blank. """
    return classify('punct', value)


def is_space(value):
    """
    Return True if every character creates some sort of white space.

    Besides the blank character this also includes tab, vertical tab,
    line feed, carriage return and form feed characters.
    """
    return classify('space', value)


def is_upper(value):
    """ Return True if every character is an uppercase letter. """
    return classify('upper', value)


def is_xdigit(value):
    """ Return True if every character is a hexadecimal digit. """
    return classify('xdigit', value)


#: A mapping of category name to its predicate function.
PREDICATES = {
    'alnum': is_alnum,
    'alpha': is_alpha,
    'cntrl': is_cntrl,
    'digit': is_digit,
    'graph': is_graph,
    'lower': is_lower,
    'print': is_print,
    'punct': is_punct,
    'space': is_space,
    'upper': is_upper,
    'xdigit': is_xdigit,
}


def categories_of(value):
    """
    Return tuple of category names that ``value`` classifies as.

    Names are given in order of :py:const:`CATEGORY_NAMES`.
    """
    text = int_to_text(value)
    return tuple(name for name in CATEGORY_NAMES if classify(name, text))
