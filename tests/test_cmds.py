import pytest

from wins.cmds import chain_funcs, join_flags


def test_join_flags_copies_in_order():
    flags = ["debug", "quiet", "server"]
    joined = join_flags(flags)
    assert joined == flags
    joined.append("extra")
    assert flags == ["debug", "quiet", "server"]


def test_join_flags_empty():
    assert join_flags([]) == []


def test_chain_funcs_without_functions_is_none():
    assert chain_funcs() is None


def test_chain_funcs_runs_in_order_and_skips_none():
    calls = []
    chained = chain_funcs(
        lambda ctx: calls.append(("first", ctx)),
        None,
        lambda ctx: calls.append(("second", ctx)),
    )
    chained("ctx")
    assert calls == [("first", "ctx"), ("second", "ctx")]


def test_chain_funcs_stops_at_first_error():
    calls = []

    def failing(ctx):
        calls.append("failing")
        raise RuntimeError("boom")

    chained = chain_funcs(failing, lambda ctx: calls.append("after"))
    with pytest.raises(RuntimeError, match="boom"):
        chained(None)
    assert calls == ["failing"]