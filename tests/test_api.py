## gnuopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

import gnuopt.api as G


def test_getopt_short_only_ignores_long_shapes():
    out = G.getopt(["-ab", "--long", "x"], "ab")
    assert out.options == {'a': True, 'b': True}
    assert out.remaining == ["--long", "x"]


def test_getopt_long():
    out = G.getopt_long(["-v", "--File", "a.zip"], "v", ["File="])
    assert out.as_tuple() == ({'v': True, 'File': "a.zip"}, [])


def test_getopt_long_only():
    out = G.getopt_long_only(["-File", "a.zip", "-v"], "v", ["File="])
    assert out.options == {'File': "a.zip", 'v': True}


def test_failed_outcome_as_tuple_carries_message():
    out = G.getopt(["-v", "-q", "x"], "v")
    assert not out.ok
    assert out.as_tuple() == ({'v': True}, [], "Option `q` is not recognized.")


def test_unwrap_raises_carried_error():
    out = G.getopt(["-f"], "f:")
    with pytest.raises(G.RequiresArgument):
        out.unwrap()
    assert G.getopt(["-f", "x"], "f:").unwrap() == ({'f': "x"}, [])


def test_errors_share_a_base_class():
    for cls in (G.RequiresArgument, G.AlreadySpecified, G.NotRecognized, G.AmbiguousPrefix):
        assert issubclass(cls, G.GetoptError)
    assert issubclass(G.GetoptSpecError, ValueError)


def test_malformed_spec_raises_instead_of_returning():
    with pytest.raises(G.GetoptSpecError):
        G.getopt(["-a"], "a;")


def test_compile_exposes_arity_tables():
    spec = G.compile("+f:o::v", ["File=", "Level=="])
    assert spec.short == {'f': G.Arity.REQUIRED, 'o': G.Arity.OPTIONAL, 'v': G.Arity.NONE}
    assert spec.long == {'File': G.Arity.REQUIRED, 'Level': G.Arity.OPTIONAL}
    assert spec.posix


def test_resolver_posix_toggle_from_environment():
    assert G.Resolver.from_environ({'POSIXLY_CORRECT': ""}).posix is True
    assert G.Resolver.from_environ({}).posix is False


def test_resolver_posix_toggle_applies_to_every_entry_point():
    resolver = G.Resolver(posix=True)
    out = resolver.getopt_long(["x", "--Force"], "", ["Force"])
    assert out.options == {}
    assert out.remaining == ["x", "--Force"]


def test_default_resolver_is_not_posix():
    out = G.getopt(["x", "-v"], "v")
    assert out.options == {'v': True}
    assert out.remaining == ["x"]


def test_compiled_tables_are_read_only():
    spec = G.compile("v", ["Force"])
    with pytest.raises(TypeError):
        spec.short['q'] = G.Arity.NONE
    with pytest.raises(TypeError):
        spec.long['Quiet'] = G.Arity.NONE
    out = G.getopt(["-q"], "v")
    assert isinstance(out.error, G.NotRecognized)
