""" Custom exceptions for xctype. """


class CtypeError(Exception):

    """ Base class of all xctype errors. """

    pass


class InvalidInput(CtypeError, TypeError):

    """ Thrown when a value is neither text nor an integer. """

    def __init__(self, value):
        self.value = value
        CtypeError.__init__(
            self, 'expected str, bytes or int, got {0}: {1!r}'.format(
                type(value).__name__, value))


class UnknownCategory(CtypeError, KeyError):

    """ Thrown for a category name that is not classified. """

    def __init__(self, category):
        self.category = category
        CtypeError.__init__(self, category)

    def __str__(self):
        return 'unknown category: {0!r}'.format(self.category)
