import pytest

from utilkit.systems import Call, Message, System, SystemGlobals


def test_ids_are_sequential():
    system = System()
    assert system.add_proc("a", lambda g: 0) == 0
    assert system.add_proc("b", lambda g: 0) == 1
    assert system.add_element("x", 1) == 0
    assert system.add_element("y", 0) == 1
    assert system.nprocs == 2
    assert system.nelements == 2
    assert system.state.data == [None, None]


def test_set_element_data():
    system = System()
    system.add_proc("p", lambda g: 0)
    element = system.add_element("e", 0)
    system.set_element_data(element, {"hp": 3})
    assert system.state.data[element] == {"hp": 3}


def test_set_element_data_unknown():
    with pytest.raises(IndexError):
        System().set_element_data(0, "value")


def test_run_next_empty():
    assert System().run_next() is False


def test_run_next_dispatches_by_element():
    seen = []

    def first(globals_state: SystemGlobals) -> int:
        seen.append(("first", globals_state.calls[0].message.code))
        return 0

    def second(globals_state: SystemGlobals) -> int:
        seen.append(("second", globals_state.calls[0].message.code))
        return 0

    system = System()
    p1 = system.add_proc("first", first)
    p2 = system.add_proc("second", second)
    e1 = system.add_element("one", p2)
    e2 = system.add_element("two", p1)
    system.add_tcall(e1, Message(10))
    system.add_call(Call(e2, Message(20)))

    assert system.run_next() is True
    assert system.run_next() is True
    assert system.run_next() is False
    assert seen == [("second", 10), ("first", 20)]
    assert len(system.state.calls) == 0


def test_broadcast_call_order():
    system = System()
    msg = Message(1, "payload")
    system.broadcast_call([2, 0, 1], msg)
    assert [call.target for call in system.state.calls] == [2, 0, 1]
    assert all(call.message == msg for call in system.state.calls)


def test_proc_receives_shared_state():
    system = System()
    system.state.global_data = "shared"
    captured = []
    system.add_proc("p", lambda g: captured.append(g.global_data) or 0)
    system.add_element("e", 0)
    system.add_tcall(0, Message(0))
    system.run_next()
    assert captured == ["shared"]


def test_unknown_target_leaves_call_queued():
    system = System()
    system.add_tcall(5, Message(0))
    with pytest.raises(IndexError):
        system.run_next()
    assert len(system.state.calls) == 1