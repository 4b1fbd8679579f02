## gnuopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from gnuopt.parser import parse_specs
from gnuopt.resolver import resolve
from gnuopt.errors import AlreadySpecified


CASES = [
    (["-xzvf", "Archive.zip", "--Force", "a", "b"], "f:vxz", ["File=", "Force"]),
    (["one", "-dvvv", "two", "--", "-x", "three"], "dvx", []),
    (["--Lev", "5", "x", "-o", "--Verb"], "o::", ["Level=", "Verbose"]),
    (["-f", "Foo", "Stop", "-b", "Bar"], "+f:b:", []),
    ([7, "-v", ["-q"], "word"], "v", None),
]


def _values(options):
    return [v for v in options.values() if isinstance(v, str)]

def _names_option(token, options):
    if not isinstance(token, str): return False
    stem = token.lstrip("-/+").split("=")[0]
    return bool(stem) and any(stem.startswith(name) or name.startswith(stem) for name in options)


@pytest.mark.parametrize("tokens, short, long", CASES)
def test_every_token_is_accounted_for(tokens, short, long):
    out = resolve(tokens, parse_specs(short, long))
    assert out.ok
    consumed = _values(out.options) + list(out.remaining)
    for token in tokens:
        if token == "--": continue
        assert _names_option(token, out.options) or token in consumed


@pytest.mark.parametrize("tokens, short, long", CASES)
def test_reparsing_remaining_without_specs_is_stable(tokens, short, long):
    remaining = resolve(tokens, parse_specs(short, long)).remaining
    again = resolve(remaining, parse_specs())
    assert again.ok and again.options == {}
    assert again.remaining == remaining


@pytest.mark.parametrize("tokens", [["--Fo", "--Foo"], ["--Foo", "--Fo"], ["--F", "--Foo"]])
def test_duplicate_detection_sees_through_abbreviations(tokens):
    out = resolve(tokens, parse_specs(None, ["Foo", "Bar"]))
    assert isinstance(out.error, AlreadySpecified)
    assert out.error.option == "Foo"
    assert out.options == {'Foo': True}


@pytest.mark.parametrize("tail", [["-v"], ["--Force", "-x", "y"], ["--", "--"], ["/v", "+v", 3]])
def test_terminator_freezes_tail_in_order(tail):
    out = resolve(["-x", "--", *tail], parse_specs("xv", ["Force"]))
    assert out.options == {'x': True}
    assert out.remaining == tail


@pytest.mark.parametrize("tokens, short", [(["--", None], "v"), (["x", None, "-v"], "+v")])
def test_reparsing_frozen_tail_with_none_is_stable(tokens, short):
    remaining = resolve(tokens, parse_specs(short)).remaining
    assert resolve(remaining, parse_specs()).remaining == remaining
