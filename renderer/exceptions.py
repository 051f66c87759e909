# renderer/exceptions.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Custom exceptions for expression rendering


class RenderError(RuntimeError):
    """Exception raised when a parsed document cannot be rendered.

    The default rendering path never raises it. It is reserved for stricter
    normal form policies that reject documents whose condition type markers
    are missing, duplicated or carry an unexpected value.
    """

    pass
