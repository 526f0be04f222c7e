"""
dashdash flag declarations and the ordered registry that holds them.

Overview
- FlagDeclaration: one declared flag.
  • key: canonical long name, matched as "--key" (and "-k" for one-character keys).
  • short_key: optional one-character alias, matched as "-s" or inside "-rs" groups.
  • descr: optional description shown by help().
  • index: optional fallback position among unflagged arguments.
  • switch: presence-only marker; a switch never swallows the token after it
    when unflagged arguments are extracted.

- FlagRegistry: insertion-ordered collection of declarations.
  • The key order drives the help listing; the mapping gives O(1) lookup.
  • Re-registering a key overwrites its declaration in place without moving it.
  • Values are not validated: empty keys and duplicates are accepted as-is.
    Only field *types* are checked.

Representation
- DeclarationType provides read-only properties for every field listed in
  __introspectable__, and a stable __repr__/__rich_repr__ for diagnostics.
"""
import functools
import logging
import operator
import re

from .faults import RegistrationError
from .utils import *

logger = logging.getLogger(__name__)


class DeclarationType(type):
    """
    Metaclass exposing __introspectable__ fields as read-only properties.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in error messages and representations.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Example
            - flag-declaration(key='name', short_key='n', descr=None, index=None, switch=False)
            """
            return f'{type(self).__typename__}({", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))})'
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_declaration(cls, metadata, /):
    """
    Internal: type-check declaration fields in place.

    - key: must be a string (the empty string is accepted).
    - short_key / descr: a string or None.
    - index: an integer or None (bool is rejected).
    - switch: coerced to bool.

    Raises
    - RegistrationError (a TypeError) on a wrong type.
    """
    if not isinstance(metadata["key"], str):
        raise RegistrationError(
            f"{cls.__typename__} 'key' must be a string",
            hint="register flags by their long name, e.g. register(\"name\", \"n\")",
        )
    if not isinstance(metadata["short_key"], str | None):
        raise RegistrationError(f"{cls.__typename__} 'short_key' must be a string")
    if not isinstance(metadata["descr"], str | None):
        raise RegistrationError(f"{cls.__typename__} 'descr' must be a string")
    if isinstance(metadata["index"], bool) or not isinstance(metadata["index"], int | None):
        raise RegistrationError(f"{cls.__typename__} 'index' must be an integer")
    metadata["switch"] = bool(metadata["switch"])


class FlagDeclaration(metaclass=DeclarationType):
    """
    A single declared flag. Instances are immutable; re-register to change one.
    """

    __introspectable__ = (
        "key",
        "short_key",
        "descr",
        "index",
        "switch",
    )

    def __new__(cls, key, /, short_key=None, descr=None, index=None, *, switch=False):
        metadata = {
            "key": key,
            "short_key": short_key,
            "descr": descr,
            "index": index,
            "switch": switch,
        }
        _sanitize_declaration(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    def __eq__(self, other):
        if not isinstance(other, FlagDeclaration):
            return NotImplemented
        return tuple(self.__rich_repr__()) == tuple(other.__rich_repr__())

    def __hash__(self):
        return hash(tuple(self.__rich_repr__()))

    @property
    def forms(self):
        """
        Every token spelling that names this flag on its own: "--key", "-short"
        and, for one-character keys, "-k".
        """
        forms = ["--" + self._key]
        if len(self._key) == 1:
            forms.append("-" + self._key)
        if self._short_key is not None:
            forms.append("-" + self._short_key)
        return tuple(forms)


class FlagRegistry:
    """
    Ordered collection of flag declarations.

    Invariant
    - every key in the order list has exactly one declaration and vice versa.
    """

    keys = mirror("keys")

    def __init__(self, declarations=(), /):
        self._keys = []
        self._flags = {}
        for declaration in declarations:
            if not isinstance(declaration, FlagDeclaration):
                raise RegistrationError("flag-registry can only be seeded with flag declarations")
            self._store(declaration)

    def _store(self, declaration):
        if declaration.key in self._flags:
            logger.debug("Overwriting flag declaration: %r", declaration.key)
        else:
            self._keys.append(declaration.key)
        self._flags[declaration.key] = declaration
        return declaration

    def register(self, key, /, short_key=None, descr=None, index=None, *, switch=False):
        """
        Declare (or re-declare) a flag and return its declaration.

        A new key is appended to the listing order; an existing key keeps its
        position and has its declaration replaced.
        """
        return self._store(FlagDeclaration(key, short_key, descr, index, switch=switch))

    def unregister(self, key, /):
        """
        Remove a key; unknown keys are ignored.
        """
        if self._flags.pop(key, None) is not None:
            self._keys.remove(key)

    def unregister_all(self):
        self._keys = []
        self._flags = {}

    def get(self, key, /):
        return self._flags.get(key)

    def __contains__(self, key):
        return key in self._flags

    def __iter__(self):
        return (self._flags[key] for key in self._keys)

    def __len__(self):
        return len(self._keys)

    def __rich_repr__(self):
        for declaration in self:
            yield declaration

    def __repr__(self):
        return f'flag-registry({", ".join(map(repr, self))})'


__all__ = (
    "FlagDeclaration",
    "FlagRegistry",
)

# Not part of the public API.
del DeclarationType
