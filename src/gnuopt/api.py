## gnuopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Arity, OptionSpec, ParseOutcome, Text, Opaque
from .errors import *
from .runtime import Resolver

_RESOLVER = Resolver()

def __getattr__(name):
    return getattr(_RESOLVER, name)
