""" Locale-independent ASCII character classification. """
# local/exported at top-level 'from xctype import ...'
from xctype.ctype import (is_alnum, is_alpha, is_cntrl, is_digit, is_graph,
                          is_lower, is_print, is_punct, is_space, is_upper,
                          is_xdigit,
                          classify, categories_of, int_to_text,
                          CATEGORIES, CATEGORY_NAMES, PREDICATES,
                          )
from xctype.exception import CtypeError, InvalidInput, UnknownCategory

__version__ = '1.0.0'

# the real purpose of __all__ is defining what gets placed into a caller's
# namespace when using statement `from xctype import *`
__all__ = ('is_alnum', 'is_alpha', 'is_cntrl', 'is_digit', 'is_graph',
           'is_lower', 'is_print', 'is_punct', 'is_space', 'is_upper',
           'is_xdigit', 'classify', 'categories_of', 'int_to_text',
           'CATEGORIES', 'CATEGORY_NAMES', 'PREDICATES', 'CtypeError',
           'InvalidInput', 'UnknownCategory',
           )
