"""
css_min.py - Regex based CSS minifier.

CSS is simple enough that a handful of substitutions, applied in order, gets
most of the savings. Malformed input is minified on a best-effort basis.
"""
import re

_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_WHITESPACE_RUN = re.compile(r"\s\s+")
_AROUND_PUNCTUATION = re.compile(r"\s?([;,:(){}>])\s?")
_MEDIA_AND = re.compile(r"\band\(", re.IGNORECASE)
_SEMICOLONS_BEFORE_BRACE = re.compile(r";+}")


def minify_css(css_text):
    """Minify a CSS string."""
    # Remove comments
    css_text = _COMMENT.sub("", css_text)
    # Minimize whitespace
    css_text = css_text.strip()
    css_text = _WHITESPACE_RUN.sub(" ", css_text)
    # Remove spaces around separators, braces, parens and the child selector
    css_text = _AROUND_PUNCTUATION.sub(r"\1", css_text)
    # Media queries need the space after "and"
    css_text = _MEDIA_AND.sub("and (", css_text)
    # Remove trailing semicolons before closing braces
    return _SEMICOLONS_BEFORE_BRACE.sub("}", css_text)
