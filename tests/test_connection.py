from dataclasses import dataclass

from thorkit.connection import (
    Connection,
    EventSystem,
    ListenerMap,
    ListenerSequence,
    id_connection,
)


@dataclass
class _Item:
    id: int
    name: str


def test_empty_connection_is_not_connected():
    connection = Connection()
    connection.disconnect()
    assert not connection.is_connected()


def test_sequence_calls_all_listeners():
    seq = ListenerSequence()
    seen = []
    seq.add(lambda x: seen.append(("a", x)))
    seq.add(lambda x: seen.append(("b", x)))
    seq.call(7)
    assert sorted(seen) == [("a", 7), ("b", 7)]
    assert len(seq) == 2


def test_sequence_disconnect_removes_listener():
    seq = ListenerSequence()
    seen = []
    first = seq.add(lambda x: seen.append("first"))
    seq.add(lambda x: seen.append("second"))
    seq.add(lambda x: seen.append("third"))
    assert first.is_connected()
    first.disconnect()
    assert not first.is_connected()
    assert len(seq) == 2
    seq.call(None)
    assert sorted(seen) == ["second", "third"]


def test_sequence_double_disconnect_is_harmless():
    seq = ListenerSequence()
    connection = seq.add(lambda x: None)
    seq.add(lambda x: None)
    connection.disconnect()
    connection.disconnect()
    assert len(seq) == 1


def test_connections_stay_valid_after_other_removal():
    seq = ListenerSequence()
    seen = []
    connections = [seq.add(lambda x, n=n: seen.append(n)) for n in range(4)]
    connections[0].disconnect()
    connections[2].disconnect()
    assert connections[3].is_connected()
    connections[3].disconnect()
    seq.call(None)
    assert seen == [1]


def test_sequence_clear_invalidates_connections():
    seq = ListenerSequence()
    connection = seq.add(lambda x: None)
    seq.clear()
    assert len(seq) == 0
    assert not connection.is_connected()


def test_map_calls_only_matching_trigger_in_order():
    listeners = ListenerMap()
    seen = []
    listeners.add("a", lambda x: seen.append(("a1", x)))
    listeners.add("b", lambda x: seen.append(("b", x)))
    listeners.add("a", lambda x: seen.append(("a2", x)))
    listeners.call("a", 1)
    assert seen == [("a1", 1), ("a2", 1)]


def test_map_disconnect_and_clear():
    listeners = ListenerMap()
    seen = []
    a = listeners.add("a", lambda x: seen.append("a"))
    b = listeners.add("b", lambda x: seen.append("b"))
    a.disconnect()
    listeners.call("a", None)
    assert seen == []
    listeners.clear("b")
    assert not b.is_connected()
    listeners.call("b", None)
    assert seen == []
    listeners.clear("missing")
    assert len(listeners) == 0


def test_map_clear_all():
    listeners = ListenerMap()
    connections = [listeners.add(t, lambda x: None) for t in ("x", "y", "x")]
    listeners.clear_all()
    assert len(listeners) == 0
    assert not any(c.is_connected() for c in connections)


def test_event_system_identity_ids():
    system = EventSystem()
    seen = []
    system.connect("jump", seen.append)
    system.trigger_event("jump")
    system.trigger_event("run")
    assert seen == ["jump"]


def test_event_system_custom_id_and_connect0():
    system = EventSystem(event_id=lambda event: event[0])
    seen = []
    system.connect("key", seen.append)
    system.connect0("key", lambda: seen.append("nullary"))
    system.trigger_event(("key", "A"))
    system.trigger_event(("mouse", "Left"))
    assert seen == [("key", "A"), "nullary"]


def test_event_system_clearing():
    system = EventSystem()
    seen = []
    connection = system.connect(1, seen.append)
    system.connect(2, seen.append)
    system.clear_connections(1)
    assert not connection.is_connected()
    system.trigger_event(1)
    system.trigger_event(2)
    assert seen == [2]
    system.clear_all_connections()
    system.trigger_event(2)
    assert seen == [2]


def test_id_connection_removes_matching_item():
    items = [_Item(1, "one"), _Item(2, "two"), _Item(3, "three")]
    connection = id_connection(items, 2)
    assert connection.is_connected()
    connection.disconnect()
    assert [item.name for item in items] == ["one", "three"]
    assert not connection.is_connected()


def test_id_connection_after_external_removal():
    items = [_Item(5, "five")]
    connection = id_connection(items, 5)
    items.clear()
    assert not connection.is_connected()
    connection.disconnect()
    assert items == []