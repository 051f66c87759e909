# parser/exceptions.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Custom exceptions for trigger point document parsing

"""Domain-specific exceptions for trigger point document processing.

A document either parses into a typed trigger point or it does not: every
failure (unreadable markup, wrong element shape, missing or invalid fields)
is reported with the single ParseError type.
"""


class ParseError(RuntimeError):
    """Exception raised when a trigger point document is malformed.

    Covers lexical errors, markup structure errors and failures binding the
    element tree onto the document model. The message carries diagnostic
    detail for logs; callers should not branch on it.
    """

    pass
