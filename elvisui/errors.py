"""Exceptions raised while building, reading and writing widget trees."""


class ElvisError(Exception):
    """Base class of every error the package raises."""


class DeserializeHtmlError(ElvisError, ValueError):
    """Text could not be read back into a tree, widget, style or value."""


class FunctionError(ElvisError):
    """A stored callback failed while it was being called."""


class SerializeHtmlError(ElvisError):
    """A tree could not be written out as markup."""


class NoneError(ElvisError):
    """A value that was required turned out to be missing."""