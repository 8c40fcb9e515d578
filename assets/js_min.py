"""
js_min.py - JavaScript minification, delegated to rjsmin.
"""
import rjsmin


def minify_js(js_text):
    """Minify a JS string. rjsmin keeps ``/*!`` license comments."""
    return rjsmin.jsmin(js_text, keep_bang_comments=True).strip()
