"""Central storage of loaded resources, addressed by user-chosen identifiers."""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Hashable, Optional, TypeVar, Union

from thorkit.exceptions import ResourceAccessError, ResourceLoadingError
from thorkit.loaders import ResourceLoader

R = TypeVar("R")


class KnownIdStrategy(Enum):
    """What :meth:`ResourceHolder.acquire` does with an identifier already in use."""

    ASSUME_NEW = "assume_new"
    """Raise :class:`ResourceAccessError` if the identifier is known."""
    REUSE = "reuse"
    """Hand out the resource already stored under the identifier."""
    RELOAD = "reload"
    """Release the stored resource and load a new one."""


class Ownership(Enum):
    """Who keeps stored resources alive."""

    CENTRAL_OWNER = "central_owner"
    """The holder keeps every resource until it is released."""
    REF_COUNTED = "ref_counted"
    """The holder only tracks resources; they vanish once no user refers to them."""


@dataclass(eq=False)
class _Entry(Generic[R]):
    resource: Union[R, "weakref.ReferenceType[R]"]
    weak: bool

    def get(self) -> Optional[R]:
        if self.weak:
            return self.resource()  # type: ignore[operator]
        return self.resource  # type: ignore[return-value]


class ResourceHolder(Generic[R]):
    """Loads, stores, hands out and releases resources by identifier.

    With :attr:`Ownership.REF_COUNTED` the holder keeps only weak references:
    callers must hold on to the returned resource, or it is released (and its
    identifier forgotten) as soon as the last reference disappears.
    """

    def __init__(self, ownership: Ownership = Ownership.CENTRAL_OWNER) -> None:
        self._ownership = ownership
        self._map: Dict[Hashable, _Entry[R]] = {}

    @property
    def ownership(self) -> Ownership:
        return self._ownership

    def acquire(
        self,
        resource_id: Hashable,
        loader: ResourceLoader[R],
        known: KnownIdStrategy = KnownIdStrategy.ASSUME_NEW,
    ) -> R:
        """Load the resource described by loader and store it as resource_id.

        Raises ResourceLoadingError if loading fails, and ResourceAccessError if
        resource_id is known and ``known`` is ASSUME_NEW.
        """
        if self._live_entry(resource_id) is None:
            return self._load(resource_id, loader)

        if known is KnownIdStrategy.RELOAD:
            self.release(resource_id)
            return self._load(resource_id, loader)
        if known is KnownIdStrategy.REUSE:
            return self[resource_id]
        raise ResourceAccessError(
            "Failed to load resource, ID already stored in ResourceHolder"
        )

    def release(self, resource_id: Hashable) -> None:
        """Forget the resource stored as resource_id."""
        if self._live_entry(resource_id) is None:
            raise ResourceAccessError(
                "Failed to release resource, ID not currently stored in ResourceHolder"
            )
        del self._map[resource_id]

    def __getitem__(self, resource_id: Hashable) -> R:
        entry = self._live_entry(resource_id)
        if entry is None:
            raise ResourceAccessError(
                "Failed to access resource, ID not currently stored in ResourceHolder"
            )
        resource = entry.get()
        assert resource is not None
        return resource

    def __contains__(self, resource_id: object) -> bool:
        try:
            return self._live_entry(resource_id) is not None  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return sum(1 for entry in list(self._map.values()) if entry.get() is not None)

    def _live_entry(self, resource_id: Hashable) -> Optional[_Entry[R]]:
        entry = self._map.get(resource_id)
        if entry is None:
            return None
        if entry.get() is None:
            # Referent gone without the callback having run yet.
            del self._map[resource_id]
            return None
        return entry

    def _load(self, resource_id: Hashable, loader: ResourceLoader[R]) -> R:
        resource = loader.load()
        if resource is None:
            raise ResourceLoadingError(f'Failed to load resource "{loader.info()}"')

        if self._ownership is Ownership.CENTRAL_OWNER:
            self._map[resource_id] = _Entry(resource, weak=False)
            return resource

        holder_map = self._map
        entry: _Entry[R]

        def forget(_ref: Any) -> None:
            # Only erase if the identifier still refers to this very entry.
            if holder_map.get(resource_id) is entry:
                del holder_map[resource_id]

        try:
            reference = weakref.ref(resource, forget)
        except TypeError:
            raise TypeError(
                f"{type(resource).__name__} objects cannot be reference-counted by a ResourceHolder"
            ) from None
        entry = _Entry(reference, weak=True)
        self._map[resource_id] = entry
        return resource