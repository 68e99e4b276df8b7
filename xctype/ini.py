""" Configuration package for xctype. """
# std imports
import logging.config
import configparser
import warnings
import inspect
import os

# local
from xctype.ctype import CATEGORY_NAMES

#: Singleton representing configuration after load
CFG = None

# pylint: disable=W0603
#         Using the global statement


def init(lookup_cfg, lookup_log):
    """
    Initialize global 'CFG' variable, a singleton to contain settings.

    Each variable (``lookup_cfg``, ``lookup_log``) is tuple lookup path of
    in-order preferences for .ini files.  If none are found, defaults are
    initialized, and the last item of each tuple is created.
    """
    log = logging.getLogger(__name__)

    def write_cfg(cfg, filepath):
        """ Write Config to filepath, creating its folder. """
        dir_name = os.path.dirname(filepath)
        if dir_name and not os.path.isdir(dir_name):
            os.makedirs(dir_name)
        with open(filepath, 'w') as fout:
            cfg.write(fout)

    # exploit last argument, presumed to be within a folder
    # writable by our process, and where the ini is wanted
    # -- cmdline.py specifys a default of: ~/.xctype/somefile.ini
    cfg_logfile = os.path.expanduser(lookup_log[-1])
    for filepath in lookup_log:
        if os.path.exists(os.path.expanduser(filepath)):
            cfg_logfile = os.path.expanduser(filepath)
            break
    else:
        try:
            write_cfg(init_log_ini(), cfg_logfile)
        except (IOError, OSError) as err:
            log.error(err)
    if os.path.exists(cfg_logfile):
        logging.config.fileConfig(cfg_logfile,
                                  disable_existing_loggers=False)
    else:
        logging.config.fileConfig(init_log_ini(),
                                  disable_existing_loggers=False)

    cfg = configparser.ConfigParser(interpolation=None)
    cfg_file = os.path.expanduser(lookup_cfg[-1])
    for filepath in lookup_cfg:
        if os.path.exists(os.path.expanduser(filepath)):
            cfg_file = os.path.expanduser(filepath)
            cfg.read(cfg_file)
            log.info('loaded %s', cfg_file)
            break
    else:
        cfg = init_cfg_ini()
        try:
            write_cfg(cfg, cfg_file)
            log.info('Saved %s', cfg_file)
        except (IOError, OSError) as err:
            log.error(err)

    global CFG
    CFG = cfg


def init_cfg_ini():
    """ Returns ConfigParser instance of system defaults. """
    cfg = configparser.ConfigParser(interpolation=None)

    cfg.add_section('output')
    # columns displayed, in order.
    cfg.set('output', 'categories', ', '.join(CATEGORY_NAMES))
    # colors are never used when stdout is not a terminal
    cfg.set('output', 'colors', 'yes')
    # code points 0-255 are displayed by --table using this encoding
    cfg.set('output', 'codec', 'cp437')
    cfg.set('output', 'match_glyph', '+')
    cfg.set('output', 'miss_glyph', '-')
    return cfg


def init_log_ini():
    """ Return ConfigParser instance of logger defaults. """
    cfg_log = configparser.RawConfigParser()
    cfg_log.add_section('formatters')
    cfg_log.set('formatters', 'keys', 'default')

    cfg_log.add_section('formatter_default')
    cfg_log.set('formatter_default', 'format',
                '%(asctime)s %(levelname)-6s '
                '%(filename)10s:%(lineno)-3s %(message)s')
    cfg_log.set('formatter_default', 'class', 'logging.Formatter')
    cfg_log.set('formatter_default', 'datefmt', '%a-%m-%d %I:%M%p')

    cfg_log.add_section('handlers')
    cfg_log.set('handlers', 'keys', 'console')

    cfg_log.add_section('handler_console')
    cfg_log.set('handler_console', 'class',
                'xctype.log.ColoredConsoleHandler')
    cfg_log.set('handler_console', 'formatter', 'default')
    cfg_log.set('handler_console', 'args', 'tuple()')

    cfg_log.add_section('loggers')
    cfg_log.set('loggers', 'keys', 'root')

    cfg_log.add_section('logger_root')
    cfg_log.set('logger_root', 'level', 'WARN')
    cfg_log.set('logger_root', 'handlers', 'console')

    return cfg_log


def get_ini(section=None, key=None, getter='get', split=False, splitsep=','):
    """
    Get an ini configuration of ``section`` and ``key``.

    If the option does not exist, an empty list, string, or False
    is returned -- return type decided by the given arguments.

    The ``getter`` method is 'get' by default, returning a string.
    For booleans, use ``getter='getboolean'``.

    To return a list, use ``split=True``.
    """
    assert section is not None, section
    assert key is not None, key
    if CFG is None:
        # a module calling get_ini before the config system is
        # initialized is going to get an empty value! warning!!
        stack = inspect.stack()
        caller_mod, caller_func = stack[1][1], stack[1][3]
        warnings.warn('ini system not (yet) initialized, '
                      'caller = {0}:{1}'.format(caller_mod, caller_func))
    elif CFG.has_option(section, key):
        getter = getattr(CFG, getter)
        value = getter(section, key)
        if split and hasattr(value, 'split'):
            return [_value.strip() for _value in value.split(splitsep)
                    if _value.strip()]
        return value
    if getter == 'getboolean':
        return False
    if split:
        return []
    return ''
