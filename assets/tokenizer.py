"""
tokenizer.py - Spot comment and conditional compilation delimiters in a line.

This is not a lexer. JS and CSS comments do not nest, so scanning for a few
literal delimiters is enough to follow comment state from line to line.
Delimiters inside string literals are not recognised as such.
"""
from enum import Enum


class Token(Enum):
    COMMENT_START = 1
    COMMENT_END = 2
    CONDITIONAL_COMPILATION_START = 3
    CONDITIONAL_COMPILATION_END = 4


# Ordered by priority, most important first. When two literals match at the
# same offset the earlier one wins, so ``/*@cc_on`` must come before ``/*``.
DELIMITERS = (
    ("/*@cc_on", Token.CONDITIONAL_COMPILATION_START),
    ("/*@if", Token.CONDITIONAL_COMPILATION_START),
    ("/*@set", Token.CONDITIONAL_COMPILATION_START),
    ("@*/", Token.CONDITIONAL_COMPILATION_END),
    ("/*", Token.COMMENT_START),
    ("*/", Token.COMMENT_END),
)


def tokenize(line, delimiters=DELIMITERS):
    """Return the tokens found in ``line``, ordered by position."""
    found = {}
    for literal, token in delimiters:
        pos = line.find(literal)
        while pos != -1:
            found.setdefault(pos, token)
            pos = line.find(literal, pos + len(literal))
    return [found[pos] for pos in sorted(found)]
