"""
dashdash faults (API misuse errors) and rendering.

Scope
- Lookups never raise for ordinary misses: a missing flag, a missing value or an
  unparsable number all come back as None (or False for booleans).
- The faults below are reserved for programming errors on the host side: a
  wrong type handed to register(), a token list that is not a list of strings,
  a layout value out of range.

Types
- DashDashFault: base type carrying message + hint; knows how to render itself
  through rich in the same short, lowercased tone used across the package.
- RegistrationError (TypeError): bad declaration field types.
- TokenError (TypeError): bad token sequences.
- LayoutError (ValueError): bad help layout configuration.

Styling
- The host may define a __styles__ mapping in __main__ to override any palette entry
  (keys: prog-name, error-title, error-message, hint-arrow, hint).
"""
from collections import defaultdict

from rich.console import Group
from rich.text import Text


class DashDashFault(Exception):
    """
    Base fault. `title` is a short class-level label used in the rendered header.
    """
    title = "fault"

    def __init__(self, message, /, hint=None):
        if not isinstance(message, str):
            raise TypeError(f"{type(self).__name__}() message must be a string")
        if not isinstance(hint, str | None):
            raise TypeError(f"{type(self).__name__}() hint must be a string")
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __rich__(self):
        styles = defaultdict(str, {
            "prog-name": "bold #E6E6F0",  # near-white package name
            "error-title": "bold #FF4DA6",  # friendly pinky title
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(__import__("__main__"), "__styles__", {}))

        header = Text.assemble(
            "[ ",
            Text("dashdash", styles["prog-name"]),
            " | ",
            Text(self.title.title(), styles["error-title"]),
            " ]"
        )
        renders = [header, Text(self.message, styles["error-message"])]
        if self.hint:
            renders.append(Text.assemble(Text(" → ", styles["hint-arrow"]), Text(self.hint, styles["hint"])))
        return Group(*renders)


class RegistrationError(DashDashFault, TypeError):
    title = "bad registration"


class TokenError(DashDashFault, TypeError):
    title = "bad tokens"


class LayoutError(DashDashFault, ValueError):
    title = "bad layout"


__all__ = (
    "DashDashFault",
    "RegistrationError",
    "TokenError",
    "LayoutError",
)
