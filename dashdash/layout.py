"""
dashdash help layout: column spacing and greedy word wrap.

A help listing looks like this (left_indent=2, line_length=60):

      --force      -f  whether to force the issue
      --recursive  -r  whether to force all the other issues,
                       even the ones nobody asked about

Columns
- long flags start at left_indent.
- short keys start at short_key_indent: the widest "--key" plus left_indent plus a
  two-space gap, over every registered flag.
- descriptions start at description_indent: short_key_indent plus the widest "-s"
  plus a two-space gap. Wrapped description lines hang at that same column.

Word wrap
- Text is cut into words (runs of non-whitespace, punctuation included), whitespace
  runs and newlines.
- A word that would push the current line past line_length starts a new line, unless
  it is a single character: lone characters (closing punctuation, "a", "-") stay on
  the line they close, even past the limit.
- A word longer than the room left on an otherwise empty line overflows in place.
- Whitespace never starts a new line; one trailing space is dropped at each break.
- Line breaks always start a new line: LF, CRLF and the other boundaries
  str.splitlines() knows (form feed, vertical tab, U+2028, ...). A lone CR is
  dropped.
- The current line is the last line already in the buffer, so wrapping continues
  a partially built row (the flag columns count toward the limit).
"""
import re
from collections import namedtuple

_GAP = 2

# line boundaries of str.splitlines(), minus the lone CR
_BREAKS = r"\n\v\f\x1c\x1d\x1e\x85\u2028\u2029"

_SEGMENTS = re.compile(
    rf"(?P<newline>\r\n|[{_BREAKS}])|(?P<space>[^\S\r{_BREAKS}]+)|(?P<word>\S+)|(?P<other>\r)"
)

Spacing = namedtuple("Spacing", (
    "left_indent",
    "short_key_indent",
    "description_indent",
    "line_length",
))


def compute_spacing(declarations, left_indent, line_length, /):
    """
    Compute the column positions for a snapshot of declarations.

    With no declarations both columns collapse onto left_indent.
    """
    declarations = list(declarations)

    short_key_indent = max(
        (len("--" + declaration.key) + left_indent + _GAP for declaration in declarations),
        default=left_indent,
    )
    description_indent = max(
        (
            short_key_indent + (len("-" + declaration.short_key) if declaration.short_key is not None else 0) + _GAP
            for declaration in declarations
        ),
        default=left_indent,
    )

    return Spacing(left_indent, short_key_indent, description_indent, line_length)


def append_wrapped(buffer, text, line_length, indent, /):
    """
    Append `text` to `buffer`, wrapping greedily at `line_length` with continuation
    lines padded by `indent` spaces. Returns the new string.
    """
    padding = " " * indent
    current = buffer.rsplit("\n", 1)[-1]

    if not buffer or not current:
        buffer += padding
        current = padding

    for found in _SEGMENTS.finditer(text):
        segment = found.group()
        match found.lastgroup:
            case "newline":
                buffer += "\n" + padding
                current = padding
            case "word":
                # a line holding only its padding is never closed: it would stay blank
                if len(current) + len(segment) > line_length and len(segment) > 1 and current != padding:
                    if buffer.endswith(" "):
                        buffer = buffer[:-1]
                    buffer += "\n" + padding
                    current = padding
                buffer += segment
                current += segment
            case "space":
                buffer += segment
                current += segment
            # a stray carriage return is dropped

    return buffer


def wrap(text, line_length, indent=0, /):
    """
    Wrap `text` on its own; every line, including the first, starts with `indent` spaces.
    """
    return append_wrapped("", text, line_length, indent)


def render_flag(declaration, spacing, /):
    """
    Render one listing row (without the terminating newline).
    """
    row = " " * spacing.left_indent + "--" + declaration.key

    if declaration.short_key is None and declaration.descr is None:
        return row

    row = row.ljust(spacing.short_key_indent)
    if declaration.short_key is not None:
        row += "-" + declaration.short_key

    if declaration.descr is None:
        return row

    row = row.ljust(spacing.description_indent)
    return append_wrapped(row, declaration.descr, spacing.line_length, spacing.description_indent)


def render_help(declarations, spacing, /, title=None, descr=None):
    """
    Render the whole help text: title, description, then one row per declaration.
    """
    help = ""

    for block in (title, descr):
        if block is None:
            continue
        help = append_wrapped(help, block, spacing.line_length, spacing.left_indent)
        help += "\n\n"

    for declaration in declarations:
        help += render_flag(declaration, spacing)
        help += "\n"

    return help


__all__ = (
    "Spacing",
    "compute_spacing",
    "append_wrapped",
    "wrap",
    "render_flag",
    "render_help",
)
