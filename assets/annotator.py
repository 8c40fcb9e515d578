"""
annotator.py - Prefix every line of a file with its line number.

Used for debug builds so that a line in the combined output can be traced
back to its source file quickly.
"""
from assets.tokenizer import Token, tokenize

SPACER = "   "


class LineAnnotator:
    """Tracks comment state across the lines of one file."""

    def __init__(self):
        self.in_comment = False
        self.in_conditional_compilation = False

    def prefix(self, number, width):
        # Inside a comment a "/* */" prefix would close it early.
        template = "/+ {:0{w}d} +/" if self.in_comment else "/* {:0{w}d} */"
        prefix = template.format(number, w=width)
        # Conditional compilation blocks are executed by some engines, so
        # nothing but whitespace may be injected there.
        if self.in_conditional_compilation:
            prefix = " " * len(prefix)
        return prefix

    def advance(self, line):
        for token in tokenize(line):
            if token is Token.CONDITIONAL_COMPILATION_START:
                self.in_conditional_compilation = True
            elif token is Token.CONDITIONAL_COMPILATION_END:
                self.in_conditional_compilation = False
            elif token is Token.COMMENT_START:
                self.in_comment = True
            elif token is Token.COMMENT_END:
                self.in_comment = False

    def annotate(self, code):
        lines = code.split("\n")
        width = len(str(len(lines)))
        out = []
        for index, line in enumerate(lines):
            out.append(self.prefix(index + 1, width) + SPACER + line)
            self.advance(line)
        return "\n".join(out)


def add_line_numbers(code):
    """Annotate ``code`` starting from a fresh comment state."""
    return LineAnnotator().annotate(code)
