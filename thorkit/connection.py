"""Connections between listeners and the containers that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Hashable, List, MutableSequence, Optional, TypeVar

from thorkit.algorithms import erase_unordered

P = TypeVar("P")
E = TypeVar("E")


class Connection:
    """Handle that can disconnect a listener from where it is registered."""

    def __init__(self, disconnector: Any = None) -> None:
        # disconnector offers connected() and disconnect()
        self._disconnector = disconnector

    def is_connected(self) -> bool:
        return self._disconnector is not None and self._disconnector.connected()

    def disconnect(self) -> None:
        """Disconnect the listener; has no effect when already disconnected."""
        if self.is_connected():
            self._disconnector.disconnect()
        self._disconnector = None


class _ListenerHandle:
    def __init__(self, remove: Callable[[], None]) -> None:
        self._remove = remove
        self._alive = True

    def connected(self) -> bool:
        return self._alive

    def disconnect(self) -> None:
        if self._alive:
            self._alive = False
            self._remove()

    def invalidate(self) -> None:
        self._alive = False


class _IdHandle:
    def __init__(self, container: MutableSequence[Any], item_id: Any) -> None:
        self._container = container
        self._id = item_id

    def _find(self) -> Optional[int]:
        return next(
            (index for index, item in enumerate(self._container) if item.id == self._id),
            None,
        )

    def connected(self) -> bool:
        return self._find() is not None

    def disconnect(self) -> None:
        index = self._find()
        if index is not None:
            del self._container[index]


def id_connection(container: MutableSequence[Any], item_id: Any) -> Connection:
    """Connection removing the element whose ``id`` equals item_id from container."""
    return Connection(_IdHandle(container, item_id))


@dataclass(eq=False)
class _Listener(Generic[P]):
    function: Callable[[P], Any]
    handle: Optional[_ListenerHandle] = field(default=None)


class ListenerSequence(Generic[P]):
    """Unordered collection of listeners, all called together."""

    def __init__(self) -> None:
        self._listeners: List[_Listener[P]] = []

    def add(self, listener: Callable[[P], Any]) -> Connection:
        entry = _Listener(listener)
        entry.handle = _ListenerHandle(lambda: self._remove(entry))
        self._listeners.append(entry)
        return Connection(entry.handle)

    def _remove(self, entry: _Listener[P]) -> None:
        index = next(i for i, item in enumerate(self._listeners) if item is entry)
        erase_unordered(self._listeners, index)

    def call(self, arg: P) -> None:
        """Invoke every listener with arg."""
        for entry in tuple(self._listeners):
            entry.function(arg)

    def clear(self) -> None:
        for entry in self._listeners:
            entry.handle.invalidate()
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)


class ListenerMap(Generic[P]):
    """Listeners grouped by trigger; only those of a trigger are called."""

    def __init__(self) -> None:
        self._listeners: Dict[Hashable, List[_Listener[P]]] = {}

    def add(self, trigger: Hashable, listener: Callable[[P], Any]) -> Connection:
        entry = _Listener(listener)
        entry.handle = _ListenerHandle(lambda: self._remove(trigger, entry))
        self._listeners.setdefault(trigger, []).append(entry)
        return Connection(entry.handle)

    def _remove(self, trigger: Hashable, entry: _Listener[P]) -> None:
        bucket = self._listeners[trigger]
        bucket[:] = [item for item in bucket if item is not entry]
        if not bucket:
            del self._listeners[trigger]

    def call(self, trigger: Hashable, arg: P) -> None:
        """Invoke every listener registered for trigger, in insertion order."""
        for entry in tuple(self._listeners.get(trigger, ())):
            entry.function(arg)

    def clear(self, trigger: Hashable) -> None:
        """Remove all listeners of one trigger."""
        for entry in self._listeners.pop(trigger, ()):
            entry.handle.invalidate()

    def clear_all(self) -> None:
        for bucket in self._listeners.values():
            for entry in bucket:
                entry.handle.invalidate()
        self._listeners.clear()

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._listeners.values())


class EventSystem(Generic[E]):
    """Dispatches events to the listeners connected to their identifier."""

    def __init__(self, event_id: Optional[Callable[[E], Hashable]] = None) -> None:
        self._event_id: Callable[[E], Hashable] = event_id or (lambda event: event)
        self._listeners: ListenerMap[E] = ListenerMap()

    def trigger_event(self, event: E) -> None:
        self._listeners.call(self._event_id(event), event)

    def connect(self, trigger: Hashable, listener: Callable[[E], Any]) -> Connection:
        return self._listeners.add(trigger, listener)

    def connect0(self, trigger: Hashable, listener: Callable[[], Any]) -> Connection:
        """Connect a listener that takes no arguments."""
        return self._listeners.add(trigger, lambda _event: listener())

    def clear_connections(self, trigger: Hashable) -> None:
        self._listeners.clear(trigger)

    def clear_all_connections(self) -> None:
        self._listeners.clear_all()