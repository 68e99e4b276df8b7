#!/usr/bin/env python
""" Command-line classification report for xctype. """
# std
import logging
import codecs
import sys

# 3rd-party
from blessed import Terminal
from wcwidth import wcswidth

# local
from xctype import cmdline
from xctype.ctype import CATEGORY_NAMES, PREDICATES, int_to_text


def main(argv=None):
    """
    xctype main entry point.

    Command line arguments to engine.py:

    - ``--config=`` location of alternate configuration file
    - ``--logger=`` location of alternate logging.ini file
    - ``--codepoints`` classify arguments as integer code points
    - ``--table`` classify every code point 0 through 255
    """
    lookup_cfg, lookup_log, options, words = cmdline.parse_args(argv)

    # load existing .ini files or create default ones.
    import xctype.ini
    xctype.ini.init(lookup_cfg, lookup_log)
    from xctype.ini import get_ini

    log = logging.getLogger(__name__)
    term = Terminal(stream=sys.stdout)
    categories = get_categories()
    codec = get_codec()

    if options['table']:
        rows = [(num, display_codepoint(num, codec)) for num in range(256)]
    else:
        if not words:
            words = [line.rstrip('\r\n') for line in sys.stdin]
            if options['codepoints']:
                words = cmdline.parse_codepoints(words)
        rows = [(word, display_word(word)) for word in words]
    log.debug('classifying %d values as %s', len(rows), categories)

    for line in report(term, categories, rows,
                       colors=get_ini('output', 'colors',
                                      getter='getboolean'),
                       match=get_ini('output', 'match_glyph') or '+',
                       miss=get_ini('output', 'miss_glyph') or '-'):
        sys.stdout.write(line + '\n')
    sys.stdout.flush()
    return 0


def get_categories():
    """ Return configured category names, skipping any unknown. """
    from xctype.ini import get_ini
    log = logging.getLogger(__name__)
    names = get_ini('output', 'categories', split=True)
    if not names:
        return CATEGORY_NAMES
    categories = []
    for name in names:
        if name not in PREDICATES:
            log.warning('[output] categories: unknown category %r', name)
            continue
        categories.append(name)
    return tuple(categories)


def get_codec():
    """ Return configured codec for displaying code points, or latin1. """
    from xctype.ini import get_ini
    log = logging.getLogger(__name__)
    codec = get_ini('output', 'codec') or 'latin1'
    try:
        codecs.lookup(codec)
    except LookupError as err:
        log.warning('[output] codec: %s, using latin1', err)
        codec = 'latin1'
    return codec


def display_word(value):
    """ Return printable representation of ``value`` for the report. """
    if isinstance(value, int):
        return '{0}'.format(value)
    text = int_to_text(value)
    if text.isprintable():
        return text
    # strip quotes of repr(), leaving escape sequences
    return repr(text)[1:-1]


def display_codepoint(num, codec):
    """ Return code point ``num`` and its glyph, as decoded by ``codec``. """
    glyph = bytes((num,)).decode(codec, 'replace')
    if not glyph.isprintable() or wcswidth(glyph) < 1:
        glyph = '.'
    return '{0:>3} {1}'.format(num, glyph)


def report(term, categories, rows, colors=True, match='+', miss='-'):
    """
    Generate lines of a classification report.

    :param blessed.Terminal term: terminal used for colors.
    :param tuple categories: category names, one column each.
    :param list rows: sequence of (value, display) tuples, where
        ``value`` is classified and ``display`` is the text shown.
    """
    width = max([wcswidth(display) for _, display in rows] + [5])
    yes = term.green(match) if colors else match
    no = term.red(miss) if colors else miss

    def ljust(text):
        """ Pad ``text`` to ``width`` by its printable column width. """
        return text + ' ' * (width - wcswidth(text))

    yield ' '.join([ljust('input')] +
                   ['{0:<6}'.format(name) for name in categories]).rstrip()
    for value, display in rows:
        cells = [(yes if PREDICATES[name](value) else no) + ' ' * 5
                 for name in categories]
        yield ' '.join([ljust(display)] + cells).rstrip()


if __name__ == '__main__':
    sys.exit(main())
