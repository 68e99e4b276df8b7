""" Command-line parser for xctype. """
import getopt
import sys
import os

USAGE = ('Usage: \n'
         '{0} [--config <filepath>] [--logger <filepath>]\n'
         '    [--codepoints] [--table] [--] [word [word ...]]\n')


def _lookup(name):
    """ Return tuple of ini paths for ``name``, in order of preference. """
    if sys.platform.lower().startswith('win32'):
        system_path = os.path.join('C:', 'xctype')
    else:
        system_path = os.path.join(os.path.sep, 'etc', 'xctype')
    return (os.path.join(system_path, name),
            os.path.expanduser(os.path.join('~', '.xctype', name)))


def _fail(message):
    sys.stderr.write('{0}\n'.format(message))
    sys.exit(1)


def parse_args(argv=None):
    """
    Parse system arguments.

    Returns tuple of (``lookup_cfg``, ``lookup_log``, ``options``,
    ``words``), where ``options`` is a dictionary of boolean keys
    ``codepoints`` and ``table``.  When ``--codepoints`` is given,
    ``words`` are integers.
    """
    argv = sys.argv[1:] if argv is None else argv
    lookup_cfg = _lookup('default.ini')
    lookup_log = _lookup('logging.ini')
    options = {'codepoints': False, 'table': False}

    try:
        opts, words = getopt.gnu_getopt(argv, '', (
            'config=', 'logger=', 'codepoints', 'table', 'help'))
    except getopt.GetoptError as err:
        _fail(err)
    for opt, arg in opts:
        if opt in ('--config',):
            lookup_cfg = (arg,)
        elif opt in ('--logger',):
            lookup_log = (arg,)
        elif opt in ('--codepoints',):
            options['codepoints'] = True
        elif opt in ('--table',):
            options['table'] = True
        elif opt in ('--help',):
            _fail(USAGE.format(os.path.basename(sys.argv[0])).rstrip())

    if options['codepoints']:
        words = parse_codepoints(words)
    return (lookup_cfg, lookup_log, options, words)


def parse_codepoints(words):
    """
    Return ``words`` as a list of integer code points.

    Any word that is not an integer is reported to stderr, exiting
    with status 1.
    """
    try:
        return [int(word) for word in words]
    except ValueError as err:
        _fail('--codepoints: {0}'.format(err))
