"""
Logging handler for xctype.
"""
import logging
import copy
import sys

# 3rd-party
from blessed import Terminal


class ColoredConsoleHandler(logging.StreamHandler):
    """
    A stream handler that colors the levelname, thats all.

    This is the ``console`` handler of the default ``logging.ini`` written
    by :func:`xctype.ini.init_log_ini`.  It reports configuration problems
    of the ``xctype`` command, such as an unknown ``[output] categories``
    name or ``codec``, on stderr, so they never mix with the report on
    stdout.  Records of level warning are displayed as ``warn``.
    """

    def __init__(self, stream=None):
        """ Constructor class, initializes blessed Terminal. """
        stream = sys.stderr if stream is None else stream
        self.term = Terminal(stream=stream)
        logging.StreamHandler.__init__(self, stream)

    def color_levelname(self, record):
        """ Modify levelname field to include terminal color sequences.  """
        record.levelname = (self.term.bold_red if record.levelno >= 40 else
                            self.term.bold_yellow if record.levelno >= 30 else
                            self.term.bold_white if record.levelno >= 20 else
                            self.term.blue)('%-5s' % (
                                record.levelname.title()
                                if record.levelname.lower() != 'warning'
                                else 'warn',))
        return record

    def emit(self, record):
        """ Emit a colored copy of record to console. """
        logging.StreamHandler.emit(self, self.color_levelname(
            copy.copy(record)))
