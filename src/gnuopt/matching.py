## gnuopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable

from .errors import NotRecognized, AmbiguousPrefix


def long_candidates(name: str, names: Iterable[str]) -> list[str]:
    """Declared names that `name` designates: itself if declared, else every name it abbreviates."""
    if not name: return []
    names = list(names)
    if name in names: return [name]
    return [n for n in names if n.startswith(name)]


def match_long(name: str, names: Iterable[str]) -> str:
    match long_candidates(name, names):
        case []:
            raise NotRecognized(name)
        case [full_name]:
            return full_name
        case several:
            raise AmbiguousPrefix(name, tuple(several))
