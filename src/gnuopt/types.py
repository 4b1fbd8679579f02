## gnuopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from types import MappingProxyType
from typing import Any, Mapping
from collections import namedtuple
from dataclasses import dataclass, field


PREFIXES = ('-', '/', '+')
TERMINATOR = '--'
VALUE_SEPARATORS = ('=', ':')


class Arity:
    NONE = 0
    REQUIRED = 1
    OPTIONAL = 2


@dataclass(frozen=True)
class Text:
    value: str

@dataclass(frozen=True)
class Opaque:
    value: Any


Token = Text | Opaque


def as_token(raw: Any) -> Token | None:
    if raw is None: return None
    return Text(raw) if isinstance(raw, str) else Opaque(raw)


@dataclass(frozen=True)
class OptionSpec:
    short: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    long: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    posix: bool = False           # leading `+` in the short spec
    w_escape: bool = False        # `W;` present in the short spec
    short_declared: bool = False  # short spec string given and non-empty, even if only `+`

    @property
    def has_short(self) -> bool:
        return self.short_declared or bool(self.short) or self.w_escape

    @property
    def has_long(self) -> bool:
        return bool(self.long)


class ParseOutcome(namedtuple('ParseOutcome', ['options', 'remaining', 'error'])):
    """Options and remaining tokens accumulated by one pass, plus the error that stopped it if any."""
    __slots__ = ()

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        return None if self.error is None else str(self.error)

    def as_tuple(self) -> tuple:
        if self.error is None:
            return self.options, self.remaining
        return self.options, self.remaining, self.message

    def unwrap(self) -> tuple[dict, list]:
        if self.error is not None:
            raise self.error
        return self.options, self.remaining
