import pytest

from kuruk.scope import run_when_out_of_scope


def test_callback_runs_on_exit_not_before():
    calls = []
    with run_when_out_of_scope(lambda: calls.append("done")):
        assert calls == []
    assert calls == ["done"]


def test_callback_runs_on_exception_and_exception_propagates():
    calls = []
    with pytest.raises(KeyError):
        with run_when_out_of_scope(lambda: calls.append("done")):
            raise KeyError("boom")
    assert calls == ["done"]


def test_nested_scopes_run_in_reverse_order():
    calls = []
    with run_when_out_of_scope(lambda: calls.append("outer")):
        with run_when_out_of_scope(lambda: calls.append("inner")):
            pass
    assert calls == ["inner", "outer"]