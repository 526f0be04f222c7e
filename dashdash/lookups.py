"""
dashdash value resolution: find the value of a flag inside a token list.

Token lists
- Index 0 is the program name placeholder; it is never a flag nor a value.
- A token starting with "-" looks like a flag. "--name" is a long flag, "-n" a short
  flag, "-rf" a group of short flags.

String lookups (resolve_string), first match wins
1. "--key" followed by a value.
2. "-key" followed by a value, for one-character keys only ("-path" is a group of
   p/a/t/h, not a flag named path).
3. "-short" followed by a value, where short is the supplied short key or the
   one registered for key.
4. the unflagged argument at the supplied (or registered) index.

A value is the token right after the flag, unless that token starts with "-". Only
the first occurrence of a flag is considered; a rejected value does not make the
lookup scan for a later occurrence.

Boolean lookups (resolve_bool)
- "--key" anywhere, or key appearing inside any single-dash token. The substring
  rule is what makes "-rf" answer for both r and f; it also makes "-for" answer
  for "or". Pass strict=True to only apply it to one-character keys.

Typed lookups
- resolve_int / resolve_float parse the string; a parse failure looks exactly like
  a missing flag (None).
- resolve_dir guarantees a trailing path separator.
"""
import logging
import os
import re

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _value_after(flag, tokens, /):
    """
    Return the token following the first occurrence of `flag` past the program
    placeholder, or None when the flag is missing, is the last token, or is
    followed by something dash-prefixed.
    """
    try:
        index = tokens.index(flag, 1)
    except ValueError:
        return None
    if index == len(tokens) - 1:
        return None
    if (value := tokens[index + 1]).startswith("-"):
        return None
    return value


def _contains_single_dashed(key, tokens, /):
    for token in tokens[1:]:
        if token.startswith("--") or not token.startswith("-"):
            continue
        if key in token:
            return True
    return False


def _effective_short_key(registry, key, short_key, /):
    if short_key is not None:
        return short_key
    if registry is not None and (declaration := registry.get(key)) is not None:
        return declaration.short_key
    return None


def _effective_index(registry, key, index, /):
    if index is not None:
        return index
    if registry is not None and (declaration := registry.get(key)) is not None:
        return declaration.index
    return None


def _is_switch(token, registry, /):
    """
    True when the dash-prefixed token only names switch declarations.
    """
    forms = {form for declaration in registry if declaration.switch for form in declaration.forms}
    if token in forms:
        return True
    if token.startswith("--"):
        return False
    # "-rf" is a switch group when every character is a one-character switch form
    characters = {form[1] for form in forms if len(form) == 2 and not form.startswith("--")}
    group = token[1:]
    return bool(group) and all(character in characters for character in group)


def extract_positionals(tokens, /, registry=None):
    """
    Return the tokens that are neither flags nor flag values, in order.

    Single pass from index 1. A dash-prefixed token marks "last was a flag"; the bare
    token right after it is taken as that flag's value and dropped. Any other bare
    token is collected.

    The pass cannot tell boolean flags from value-taking ones: "--verbose in.txt"
    drops in.txt. Declarations registered with switch=True are the exception when
    a registry is given: their tokens never take a value.
    """
    positionals = []
    last_was_flag = False

    for token in tokens[1:]:
        if token.startswith("-"):
            last_was_flag = registry is None or not _is_switch(token, registry)
            continue
        if last_was_flag:
            last_was_flag = False
            continue
        positionals.append(token)

    return positionals


def resolve_string(registry, tokens, key, /, short_key=None, index=None):
    if (value := _value_after("--" + key, tokens)) is not None:
        logger.debug("Resolved %r from long flag", key)
        return value

    if len(key) == 1 and (value := _value_after("-" + key, tokens)) is not None:
        logger.debug("Resolved %r from single-dashed key", key)
        return value

    if (short_key := _effective_short_key(registry, key, short_key)) is not None:
        if (value := _value_after("-" + short_key, tokens)) is not None:
            logger.debug("Resolved %r from short key %r", key, short_key)
            return value

    if (index := _effective_index(registry, key, index)) is not None:
        positionals = extract_positionals(tokens, registry)
        if 0 <= index < len(positionals):
            logger.debug("Resolved %r from unflagged argument %d", key, index)
            return positionals[index]

    return None


def resolve_bool(registry, tokens, key, /, short_key=None, *, strict=False):
    if "--" + key in tokens[1:]:
        return True

    if (not strict or len(key) == 1) and _contains_single_dashed(key, tokens):
        return True

    if (short_key := _effective_short_key(registry, key, short_key)) is None:
        return False
    if strict and len(short_key) != 1:
        return False
    return _contains_single_dashed(short_key, tokens)


def resolve_int(registry, tokens, key, /, short_key=None, index=None):
    if (value := resolve_string(registry, tokens, key, short_key, index)) is None:
        return None
    if not _INTEGER.fullmatch(value):
        logger.debug("Value %r of %r is not an integer", value, key)
        return None
    return int(value)


def resolve_float(registry, tokens, key, /, short_key=None, index=None):
    if (value := resolve_string(registry, tokens, key, short_key, index)) is None:
        return None
    # float() is laxer than a command line should be about these.
    if value != value.strip() or "_" in value:
        logger.debug("Value %r of %r is not a number", value, key)
        return None
    try:
        return float(value)
    except ValueError:
        logger.debug("Value %r of %r is not a number", value, key)
        return None


def resolve_dir(registry, tokens, key, /, short_key=None, index=None):
    if (path := resolve_string(registry, tokens, key, short_key, index)) is None:
        return None
    if path and not path.endswith(tuple(filter(None, (os.sep, os.altsep)))):
        path += os.sep
    return path


__all__ = (
    "extract_positionals",
    "resolve_string",
    "resolve_bool",
    "resolve_int",
    "resolve_float",
    "resolve_dir",
)
