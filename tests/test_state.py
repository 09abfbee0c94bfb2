import pytest

from elvisui.errors import FunctionError
from elvisui.state import FnBox, State


class Recorder(FnBox):
    def __init__(self):
        self.seen = []

    def call(self, props):
        self.seen.append(props)


class Failing(FnBox):
    def call(self, props):
        raise FunctionError("call failed")


def test_process_runs_trigger():
    recorder = Recorder()
    state = State("widget", recorder)
    state.process(5)
    state.process(7)
    assert recorder.seen == [5, 7]


def test_process_propagates_failure():
    state = State("widget", Failing())
    with pytest.raises(FunctionError):
        state.process(1)


def test_get_missing_key_is_empty():
    assert State("widget", Recorder()).get("missing") == ""


def test_set_then_get():
    state = State("widget", Recorder())
    state.set("name", "elvis")
    assert state.get("name") == "elvis"
    state.set("name", "presley")
    assert state.get("name") == "presley"


def test_states_are_independent():
    first = State("a", Recorder())
    second = State("b", Recorder())
    first.set("k", "v")
    assert second.get("k") == ""
    assert first.widget == "a"


def test_fnbox_is_abstract():
    with pytest.raises(TypeError):
        FnBox()