## gnuopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Token shapes and the rewrites applied before a token is classified.
#

from typing import Any

from .types import PREFIXES, TERMINATOR, VALUE_SEPARATORS, OptionSpec
from .errors import RequiresArgument
from .matching import long_candidates


def is_terminator(text: str) -> bool:
    return text == TERMINATOR

def is_long_form(text: str) -> bool:
    """Doubled prefix followed by a non-empty name: `--name`, `--name=value`, `//name`."""
    return (len(text) > 2 and text[0] in PREFIXES and text[1] == text[0]
            and text[2] not in PREFIXES and text[2] not in VALUE_SEPARATORS)

def is_short_form(text: str) -> bool:
    """Single prefix followed by at least one non-prefix character: `-x`, `/x`, `+xyz`."""
    return len(text) > 1 and text[0] in PREFIXES and text[1] not in PREFIXES

def looks_like_option(raw: Any) -> bool:
    # Only text can look like an option; anything else never serves as an option argument either.
    if not isinstance(raw, str): return True
    return is_terminator(raw) or is_long_form(raw) or is_short_form(raw)


def split_long(text: str) -> tuple[str, str | None]:
    """Split `--name=value` (or `--name:value`) into its name and inline value."""
    body = text[2:]
    cuts = [i for i in (body.find(sep) for sep in VALUE_SEPARATORS) if i >= 0]
    if not cuts: return body, None
    cut = min(cuts)
    return body[:cut], body[cut+1:]


def rewrite_long_only(text: str, spec: OptionSpec) -> str:
    if not is_short_form(text): return text
    candidate = TERMINATOR + text[1:]
    name, _ = split_long(candidate)
    if long_candidates(name, spec.long): return candidate
    # No long option fits, so fall back to a short option cluster when the first character allows it.
    if text[1] in spec.short or (spec.w_escape and text[1] == 'W'):
        return '-' + text[1:]
    return candidate


def rewrite_w_escape(text: str, items: list, index: int, spec: OptionSpec) -> tuple[str, int]:
    """Turn `-W name` or `-Wname` into `--name`, returning the rewritten text and the last index consumed."""
    if not (spec.w_escape and spec.has_long and is_short_form(text) and text[1] == 'W'):
        return text, index

    if len(text) > 2:
        rewritten = TERMINATOR + text[2:]
    elif index + 1 < len(items) and not looks_like_option(items[index + 1]):
        rewritten, index = TERMINATOR + items[index + 1], index + 1
    else:
        raise RequiresArgument('W')

    if not is_long_form(rewritten): raise RequiresArgument('W')
    return rewritten, index
