## gnuopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable

from .types import Arity, Opaque, OptionSpec, ParseOutcome, as_token
from .errors import GetoptError, RequiresArgument, AlreadySpecified, NotRecognized
from .tokens import is_terminator, is_long_form, is_short_form, looks_like_option, split_long
from .tokens import rewrite_long_only, rewrite_w_escape
from .matching import match_long
from .formatting import show_step


def _has_value(items: list, index: int) -> bool:
    return index + 1 < len(items) and not looks_like_option(items[index + 1])


def resolve_long(text: str, items: list, index: int, table: dict[str, int], options: dict) -> int:
    """Resolve one `--name[=value]` token, returning the index of the last token consumed."""
    given, value = split_long(text)
    name = match_long(given, table)
    if name in options:
        raise AlreadySpecified(name)

    arity = table[name]
    if arity == Arity.NONE:
        options[name] = True
    elif value is not None:
        options[name] = value
    elif _has_value(items, index):
        index += 1
        options[name] = items[index]
    elif arity == Arity.REQUIRED:
        raise RequiresArgument(name)
    else:
        options[name] = True
    return index


def resolve_short(text: str, items: list, index: int, table: dict[str, int], options: dict) -> int:
    """Resolve a cluster such as `-xzvf`, returning the index of the last token consumed."""
    j = 1
    while j < len(text):
        char = text[j]
        if char not in table:
            raise NotRecognized(char)
        if char in options:
            raise AlreadySpecified(char)

        if (arity := table[char]) != Arity.NONE:
            if j == 1 and len(text) > 2:
                options[char] = text[2:]
                return index
            if _has_value(items, index):
                options[char] = items[index + 1]
                return index + 1
            if arity == Arity.REQUIRED:
                raise RequiresArgument(char)
            options[char] = True
            j += 1
            continue

        repeats = 1
        while j + repeats < len(text) and text[j + repeats] == char:
            repeats += 1
        options[char] = repeats if repeats > 1 else True
        j += repeats
    return index


def _dispatch(text: str, items: list, index: int, spec: OptionSpec, long_only: bool,
              options: dict, remaining: list) -> int:
    if long_only and spec.has_long:
        text = rewrite_long_only(text, spec)
    text, index = rewrite_w_escape(text, items, index, spec)

    if spec.has_long and is_long_form(text):
        return resolve_long(text, items, index, spec.long, options)
    if spec.has_short and is_short_form(text):
        return resolve_short(text, items, index, spec.short, options)
    remaining.append(items[index])
    return index


def resolve(tokens: Iterable, spec: OptionSpec, *, long_only: bool = False, posix: bool = False,
            verbosity: int = 0) -> ParseOutcome:
    """Single left-to-right pass over `tokens`, stopping at the first error.

    The options and remaining tokens gathered up to that point are returned either way;
    errors travel inside the outcome rather than being raised. `None` tokens are skipped
    everywhere, including after the terminator.
    """
    items = list(tokens)
    options, remaining = {}, []
    posix = posix or spec.posix
    # Without any declared option nothing is syntax, not even the terminator.
    parsing = spec.has_short or spec.has_long

    index = 0
    try:
        while index < len(items):
            raw = items[index]
            if verbosity > 0:
                show_step(index, raw, options, remaining)

            token = as_token(raw)
            if token is None:
                pass
            elif isinstance(token, Opaque) or not parsing:
                remaining.append(raw)
            elif is_terminator(token.value):
                remaining.extend(t for t in items[index + 1:] if t is not None)
                index = len(items)
                break
            else:
                index = _dispatch(token.value, items, index, spec, long_only, options, remaining)

            index += 1
            if posix and remaining:
                remaining.extend(t for t in items[index:] if t is not None)
                index = len(items)
                break
    except GetoptError as exc:
        if verbosity > 0:
            print(f"\033[90m{index:>3} :\033[0m  \033[33m{exc}\033[0m")
        return ParseOutcome(options, remaining, exc)

    if verbosity > 0:
        show_step(index, None, options, remaining)
    return ParseOutcome(options, remaining, None)
