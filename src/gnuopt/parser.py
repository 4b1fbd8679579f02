## gnuopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from types import MappingProxyType
from functools import lru_cache
from typing import Iterable

import lark
from .types import Arity, OptionSpec
from .errors import GetoptSpecError


GRAMMAR = r"""start: posix_marker? entry*
posix_marker: PLUS
?entry: w_escape | option
w_escape: W_ESCAPE
option: OPTION (OPTIONAL | REQUIRED)?

// TOKENS
PLUS: "+"
W_ESCAPE.2: "W;"
OPTIONAL.2: "::"
REQUIRED: ":"
OPTION: /[^:;+\-\/\s]/
"""

_PARSER = lark.Lark(GRAMMAR, start='start', parser="lalr", lexer="contextual")


def _is_token(node, type_: str) -> bool: return isinstance(node, lark.Token) and node.type == type_
def _is_tree(node, data_: str) -> bool: return isinstance(node, lark.Tree) and node.data == data_


def parse_short_spec(spec: str | None) -> tuple[dict[str, int], bool, bool]:
    """Scan a getopt(3) style options string into an arity table.

    Returns the table keyed by option character, whether the string started with
    `+` (stop at the first positional argument), and whether `W;` was declared.
    """
    if not spec: return {}, False, False
    try:
        tree = _PARSER.parse(spec)
    except (lark.exceptions.UnexpectedInput, lark.exceptions.LexError) as exc:
        column = getattr(exc, 'column', None)
        token = getattr(exc, 'token', None) or getattr(exc, 'char', None)
        raise GetoptSpecError(f"Short option spec `{spec}` is malformed at column {column}.",
                              spec=spec, column=column, token=str(token) if token is not None else None) from None

    table, posix, w_escape = {}, False, False
    for node in tree.children:
        if _is_tree(node, 'posix_marker'):
            posix = True
        elif _is_tree(node, 'w_escape'):
            w_escape = True
        else:
            assert _is_tree(node, 'option')
            char, *suffix = node.children
            if not suffix: arity = Arity.NONE
            elif _is_token(suffix[0], 'OPTIONAL'): arity = Arity.OPTIONAL
            else: arity = Arity.REQUIRED
            table[char.value] = arity
    return table, posix, w_escape


def parse_long_spec(specs: Iterable[str] | None) -> dict[str, int]:
    table = {}
    for entry in specs or ():
        if entry.endswith('=='): name, arity = entry[:-2], Arity.OPTIONAL
        elif entry.endswith('='): name, arity = entry[:-1], Arity.REQUIRED
        else: name, arity = entry, Arity.NONE
        if not name:
            raise GetoptSpecError(f"Long option spec `{entry}` has no name.", spec=entry)
        table[name] = arity
    return table


@lru_cache(maxsize=256)
def _compile(short_spec: str | None, long_specs: tuple[str, ...]) -> OptionSpec:
    short, posix, w_escape = parse_short_spec(short_spec)
    # Cached specs are shared between callers, so their tables are read-only views.
    return OptionSpec(short=MappingProxyType(short), long=MappingProxyType(parse_long_spec(long_specs)),
                      posix=posix, w_escape=w_escape, short_declared=bool(short_spec))

def parse_specs(short_spec: str | None = None, long_specs: Iterable[str] | None = None) -> OptionSpec:
    return _compile(short_spec or None, tuple(long_specs or ()))
