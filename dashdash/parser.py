"""
dashdash command line parser: register flags, query values, print help.

What this module provides
- CommandLineParser: the facade host programs use.
  • register()/unregister()/unregister_all() manage an ordered FlagRegistry.
  • string()/bool()/int()/double()/dir() look values up in a token list.
  • unflagged_arguments() lists the tokens not attached to any flag.
  • help()/print_help() render the aligned, wrapped flag listing.
- tokens_from(line): build a token list from a space-separated string (tests, demos).

Token lists
- Every lookup takes an optional `args` token list. When omitted, the parser's own
  `arguments` are used; set them once from sys.argv for convenient access:

      parser = CommandLineParser("grate", "slices audio files into test buffers")
      parser.arguments = sys.argv
      parser.register("input", "i", "path of the file to slice", index=0)
      if parser.bool("help", "h"):
          parser.print_help()
      path = parser.string("input")

Misses never raise: a missing flag, a missing value, or a value that does not parse
all come back as None (False for bool()). Only API misuse raises (see faults).
"""
import builtins

from rich.console import Console

from . import layout, lookups
from .faults import LayoutError, TokenError
from .flags import FlagRegistry
from .utils import *


def tokens_from(line, /):
    """
    Split `line` on single spaces and prepend the "." program placeholder.

    Quoting is not honoured: this builds fixtures, it does not emulate a shell.

    Example
    - tokens_from("--name Scruffy") -> [".", "--name", "Scruffy"]
    """
    if not isinstance(line, str):
        raise TokenError("tokens_from() argument must be a string")
    return ["."] + [token for token in line.split(" ") if token]


def _sanitize_tokens(args, /):
    if isinstance(args, str) or args is None:
        raise TokenError(
            "token list must be a sequence of strings",
            hint="omit 'args' to use the parser arguments, or build one with tokens_from()",
        )
    try:
        tokens = list(args)
    except TypeError:
        raise TokenError("token list must be a sequence of strings") from None
    if not all(isinstance(token, str) for token in tokens):
        raise TokenError("token list must only contain strings")
    return tokens


def _sanitize_layout(name, value, minimum, /):
    if isinstance(value, bool) or not isinstance(value, int):
        raise LayoutError(f"{name!r} must be an integer")
    if value < minimum:
        raise LayoutError(f"{name!r} must be at least {minimum}", hint=f"got {value}")
    return value


class CommandLineParser:
    """
    Flag registry, lookups and help rendering behind one object.

    Configuration
    - title / descr: optional preamble printed above the flag listing.
    - left_indent: column of the long flags (>= 0, default 2).
    - line_length: wrap limit of the help text (> 0, default 60).
    - arguments: token list used when a lookup gets no `args`.
    - help_flag: register --help/-h up front.
    - strict_groups: only match one-character keys inside "-abc" groups in bool().
    """

    registry = mirror("registry")

    def __init__(
            self,
            title=None,
            descr=None,
            /,
            *,
            left_indent=2,
            line_length=60,
            arguments=(),
            help_flag=False,
            strict_groups=False,
    ):
        self.title = title
        self.descr = descr
        self.left_indent = left_indent
        self.line_length = line_length
        self.arguments = arguments
        self.strict_groups = builtins.bool(strict_groups)
        self._registry = FlagRegistry()

        if help_flag:
            self.register("help", "h", "Show this help message", switch=True)

    @property
    def left_indent(self):
        return self._left_indent

    @left_indent.setter
    def left_indent(self, value):
        self._left_indent = _sanitize_layout("left_indent", value, 0)

    @property
    def line_length(self):
        return self._line_length

    @line_length.setter
    def line_length(self, value):
        self._line_length = _sanitize_layout("line_length", value, 1)

    @property
    def arguments(self):
        return list(self._arguments)

    @arguments.setter
    def arguments(self, value):
        self._arguments = _sanitize_tokens(value)

    def _tokens(self, args):
        return _sanitize_tokens(coalesce(args, self._arguments))

    # --- registration ---

    def register(self, key, /, short_key=None, descr=None, index=None, *, switch=False):
        """
        Declare a flag.

        - key: long name, matched as "--key" (one-character keys also as "-k").
        - short_key: one-character alias, matched as "-s" and inside "-rs" groups.
          Lookups of `key` fall back to it automatically.
        - descr: text for help().
        - index: position among unflagged arguments used when neither form is present,
          e.g. accept an input path either as "--input PATH" or as a bare "PATH".
        - switch: the flag never takes a value, so the token after it stays an
          unflagged argument.
        """
        return self._registry.register(key, short_key, descr, index, switch=switch)

    def unregister(self, key, /):
        self._registry.unregister(key)

    def unregister_all(self):
        self._registry.unregister_all()

    # --- lookups ---

    def string(self, key, /, short_key=None, index=None, args=Unset):
        """
        Return the value given for `key`, or None.

        Looks at "--key", then "-key" for one-character keys, then "-short_key"
        (supplied or registered), then the unflagged argument at `index` (supplied
        or registered).
        """
        return lookups.resolve_string(self._registry, self._tokens(args), key, short_key, index)

    def bool(self, key, /, short_key=None, args=Unset):
        """
        Return True if the flag is present.

        Short keys combine: "-rf" is True for both r and f, while "--rf" is True for
        rf and False for r and f. Keys are matched as substrings of "-abc" groups, so
        "-rf" also answers for rf unless strict_groups is set.
        """
        return lookups.resolve_bool(
            self._registry, self._tokens(args), key, short_key, strict=self.strict_groups
        )

    def int(self, key, /, short_key=None, index=None, args=Unset):
        return lookups.resolve_int(self._registry, self._tokens(args), key, short_key, index)

    def double(self, key, /, short_key=None, index=None, args=Unset):
        return lookups.resolve_float(self._registry, self._tokens(args), key, short_key, index)

    def dir(self, key, /, short_key=None, index=None, args=Unset):
        """
        Like string(), with a trailing path separator appended when missing.
        """
        return lookups.resolve_dir(self._registry, self._tokens(args), key, short_key, index)

    def unflagged_arguments(self, args=Unset):
        return lookups.extract_positionals(self._tokens(args), self._registry)

    # --- help ---

    def help(self):
        """
        Return the help text: title, description, then every flag in registration
        order, wrapped to line_length.

        Registering a "help" flag and calling this is up to the host (or pass
        help_flag=True).
        """
        spacing = layout.compute_spacing(self._registry, self._left_indent, self._line_length)
        return layout.render_help(self._registry, spacing, self.title, self.descr)

    def print_help(self, console=Unset):
        """
        Write help() to standard output (or to the given rich Console) verbatim.
        """
        console = coalesce(console, Console())
        console.out(self.help(), highlight=False)

    tokens_from = staticmethod(tokens_from)

    def __rich_repr__(self):
        yield "title", self.title
        yield "descr", self.descr
        yield "left_indent", self._left_indent
        yield "line_length", self._line_length
        yield "strict_groups", self.strict_groups
        yield "registry", self._registry


__all__ = (
    "CommandLineParser",
    "tokens_from",
)
