## gnuopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import os
from typing import Iterable, Mapping

from .types import OptionSpec, ParseOutcome
from .parser import parse_specs
from .resolver import resolve as _resolve


class Resolver:
    """Entry points over the single resolution engine, with the POSIX toggle injected once."""

    def __init__(self, posix: bool = False, verbosity: int = 0):
        self.posix = posix
        self.verbosity = verbosity

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None, verbosity: int = 0) -> "Resolver":
        environ = os.environ if environ is None else environ
        return cls(posix='POSIXLY_CORRECT' in environ, verbosity=verbosity)

    # Specs ───────────────────────────────────────────────────────────────────────────────────
    def compile(self, short_spec: str | None = None, long_specs: Iterable[str] | None = None) -> OptionSpec:
        return parse_specs(short_spec, long_specs)

    # Resolution ──────────────────────────────────────────────────────────────────────────────
    def resolve(self, tokens: Iterable, short_spec: str | None = None, long_specs: Iterable[str] | None = None,
                *, long_only: bool = False) -> ParseOutcome:
        """Resolve `tokens` against the given specs; resolution errors are returned in the outcome.

        Raises `GetoptSpecError` when `short_spec` or `long_specs` is malformed: that is a
        mistake in the calling program, not in the tokens, and is reported before any token is read.
        """
        spec = self.compile(short_spec, long_specs)
        return _resolve(tokens, spec, long_only=long_only, posix=self.posix, verbosity=self.verbosity)

    def getopt(self, tokens: Iterable, short_spec: str | None) -> ParseOutcome:
        return self.resolve(tokens, short_spec)

    def getopt_long(self, tokens: Iterable, short_spec: str | None, long_specs: Iterable[str] | None) -> ParseOutcome:
        return self.resolve(tokens, short_spec, long_specs)

    def getopt_long_only(self, tokens: Iterable, short_spec: str | None, long_specs: Iterable[str] | None) -> ParseOutcome:
        return self.resolve(tokens, short_spec, long_specs, long_only=True)
