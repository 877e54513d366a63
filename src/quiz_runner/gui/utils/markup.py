"""
Rich-text rendering for question text.

Question text may embed inline formulas between single dollar signs,
e.g. "Solve $2x + 3 = 11$". Qt labels have no TeX engine, so formulas are
parsed with pylatexenc and rebuilt as Qt rich text: scripts become
<sup>/<sub>, \\frac a stacked-looking fraction, \\sqrt a radical with an
overline, and symbol commands their Unicode characters. Everything else
is HTML-escaped.
"""
from __future__ import annotations

import html
import logging
import re

from pylatexenc.latex2text import LatexNodes2Text
from pylatexenc.latexwalker import (
    LatexCharsNode,
    LatexCommentNode,
    LatexEnvironmentNode,
    LatexGroupNode,
    LatexMacroNode,
    LatexMathNode,
    LatexSpecialsNode,
    LatexWalker,
    LatexWalkerError,
)

logger = logging.getLogger(__name__)

_FORMULA_RE = re.compile(r"\$([^$]+)\$")

_SCRIPT_MARKERS = {"^": "sup", "_": "sub"}

# Macros whose first mandatory argument is rendered as-is
_TEXT_MACROS = {"text", "textrm", "mathrm", "mathit", "mathbf", "mathsf", "operatorname", "mbox"}

# Sizing delimiters; the delimiter itself follows as plain text
_IGNORED_MACROS = {"left", "right", "displaystyle"}

_MATH_SPAN = '<span class="math" style="font-family: serif; font-style: italic;">{}</span>'

_to_text = LatexNodes2Text()


def _wrap(tag: str, inner: str) -> str:
    return f"<{tag}>{inner}</{tag}>"


def _mandatory_args(node: LatexMacroNode) -> list:
    if node.nodeargd is None:
        return []
    return [arg for arg in node.nodeargd.argnlist if arg is not None]


class _FormulaRenderer:
    """
    Walks a pylatexenc node list and emits Qt rich text.

    `^` and `_` arrive as plain characters, so the renderer keeps the
    pending script marker across nodes until its argument shows up.
    """

    def __init__(self) -> None:
        self._script = None

    def render(self, nodelist) -> str:
        saved, self._script = self._script, None
        parts = [self._node(node) for node in nodelist if node is not None]
        # A dangling marker has no argument; show it literally
        if self._script is not None:
            parts.append("^" if self._script == "sup" else "_")
        self._script = saved
        return "".join(parts)

    def _emit(self, rendered: str) -> str:
        if self._script is None:
            return rendered
        tag, self._script = self._script, None
        return _wrap(tag, rendered)

    def _node(self, node) -> str:
        if isinstance(node, LatexCharsNode):
            return self._chars(node.chars)
        if isinstance(node, LatexGroupNode):
            return self._emit(self.render(node.nodelist))
        if isinstance(node, LatexMacroNode):
            return self._macro(node)
        if isinstance(node, LatexSpecialsNode):
            if node.specials_chars in _SCRIPT_MARKERS and self._script is None:
                self._script = _SCRIPT_MARKERS[node.specials_chars]
                return ""
            return self._emit(html.escape(node.specials_chars, quote=False))
        if isinstance(node, (LatexMathNode, LatexEnvironmentNode)):
            return self._emit(self.render(node.nodelist))
        if isinstance(node, LatexCommentNode):
            # An unescaped % is meant literally in a quiz formula
            return html.escape("%" + node.comment + node.comment_post_space, quote=False)
        return ""

    def _chars(self, chars: str) -> str:
        out = []
        for ch in chars:
            if self._script is not None:
                # TeX skips spaces between the marker and its argument
                if ch.isspace():
                    continue
                out.append(self._emit(html.escape(ch, quote=False)))
            elif ch in _SCRIPT_MARKERS:
                self._script = _SCRIPT_MARKERS[ch]
            else:
                out.append(html.escape(ch, quote=False))
        return "".join(out)

    def _macro(self, node: LatexMacroNode) -> str:
        name = node.macroname
        args = _mandatory_args(node)

        if name in _IGNORED_MACROS:
            return ""
        if name == "frac" and len(args) == 2:
            numerator, denominator = (self.render([arg]) for arg in args)
            return self._emit(f"{_wrap('sup', numerator)}⁄{_wrap('sub', denominator)}")
        if name == "sqrt" and args:
            index = node.nodeargd.argnlist[0] if len(node.nodeargd.argnlist) > 1 else None
            radicand = self.render([args[-1]])
            root = f'√<span style="text-decoration: overline;">{radicand}</span>'
            if index is not None:
                root = _wrap("sup", self.render([index])) + root
            return self._emit(root)
        if name in _TEXT_MACROS and args:
            return self._emit(self.render([args[0]]))

        if name == "circ" and self._script == "sup":
            symbol = "°"
        else:
            text = _to_text.nodelist_to_text([node])
            # Spacing commands (\, \quad) come back as whitespace
            symbol = text.strip() or (" " if text else "")
        if not symbol and not args:
            symbol = "\\" + name
            logger.debug(f"No text form for \\{name}; showing it raw")
        rendered = self._emit(html.escape(symbol, quote=False))
        return rendered + (node.macro_post_space if not args else "")


def _render_formula(formula: str) -> str:
    try:
        nodelist, _, _ = LatexWalker(formula).get_latex_nodes()
    except LatexWalkerError as e:
        logger.warning(f"Could not parse formula {formula!r}: {e}")
        return _MATH_SPAN.format(html.escape(formula, quote=False))
    return _MATH_SPAN.format(_FormulaRenderer().render(nodelist))


def render_markup(text: str | None) -> str:
    """
    Render question text with inline formulas to Qt rich text.

    Args:
        text: Raw text, possibly containing `$...$` formula markers

    Returns:
        HTML fragment ("" for empty input)

    Example:
        >>> render_markup("Area is $\\pi r^2$")
        'Area is <span class="math" ...>π r<sup>2</sup></span>'
    """
    if not text:
        return ""

    parts = []
    pos = 0
    for match in _FORMULA_RE.finditer(text):
        parts.append(html.escape(text[pos:match.start()], quote=False))
        parts.append(_render_formula(match.group(1)))
        pos = match.end()
    parts.append(html.escape(text[pos:], quote=False))
    return "".join(parts)


def render_formula(formula: str | None) -> str:
    """Render a bare formula (no `$` markers), e.g. a reference answer."""
    if not formula:
        return ""
    return _render_formula(formula)
