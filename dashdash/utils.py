"""
dashdash utilities shared by the flags and parser layers.

- Unset: "argument not supplied" default for the facade lookups, so that an explicit
  args=None can be rejected instead of silently meaning "use the stored arguments".
- coalesce(value, default): resolve Unset to the stored fallback.
- rename("name"): decorator giving generated methods a stable __name__/__qualname__.
- mirror("attr"): read-only property over self._attr; lists are handed out as tuples.
"""
from typing import final


@final
class UnsetType:
    """
    Type of the Unset sentinel. Falsey, printed as "Unset", one instance per process.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Return `object`, or `default` when it is Unset. None and other falsey values
    are returned as-is.
    """
    return default if object is Unset else object


def rename(name, /):
    """
    Decorator setting __name__ and __qualname__ of the decorated function.
    """
    if not isinstance(name, str):
        raise TypeError("@rename() argument must be a string")

    def decorator(function):
        function.__name__ = name
        function.__qualname__ = name
        return function

    return decorator


def mirror(name, /):
    """
    Read-only property over "_{name}".

    A list is returned as a tuple so the owner's copy cannot be mutated through it;
    anything else is returned as stored.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        value = getattr(self, "_" + name)
        return tuple(value) if isinstance(value, list) else value

    return property(getter)


Unset = UnsetType()


__all__ = (
    "coalesce",
    "rename",
    "mirror",
    "UnsetType",
    "Unset",
)
