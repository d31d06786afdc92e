"""Resource loaders: deferred loading functions paired with an identifying tag."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

from thorkit.graphics import Color, IntRect, Vector2, to_string

R = TypeVar("R")

_SEPARATOR = "; "


class ResourceLoader(Generic[R]):
    """Stores how to load a resource and a string identifying it.

    The loader function returns the resource, or None when loading fails.
    Two loaders have the same info if and only if they refer to the same resource.
    """

    def __init__(self, loader: Callable[[], Optional[R]], info: str) -> None:
        self._loader = loader
        self._info = info

    def load(self) -> Optional[R]:
        """Load the resource; None signals failure."""
        return self._loader()

    def info(self) -> str:
        """String describing the resource loader."""
        return self._info

    def __repr__(self) -> str:
        return f"ResourceLoader({self._info!r})"


def _address(obj: Any) -> str:
    """Identity-based token for objects referenced rather than copied."""
    return f"0x{id(obj):x}"


def _tag_part(value: Any) -> str:
    if isinstance(value, (Color, IntRect, Vector2)):
        return to_string(value)
    return str(value)


def make_tag(kind: str, *args: Any) -> str:
    """Build an identifying tag such as ``[FromFile] name; arg``."""
    text = f"[From{kind}] " if kind else ""
    text += _SEPARATOR.join(_tag_part(arg) for arg in args)
    if text.endswith(_SEPARATOR):
        text = text[: -len(_SEPARATOR)]
    return text


def make_resource_loader(
    factory: Callable[[], R], bool_loader: Callable[[R], bool], key: str
) -> ResourceLoader[R]:
    """Create a loader that builds a resource with factory and fills it with bool_loader.

    The resource is handed out only if bool_loader reports success.
    """

    def load() -> Optional[R]:
        resource = factory()
        return resource if bool_loader(resource) else None

    return ResourceLoader(load, key)


def _looks_like_stream(obj: Any) -> bool:
    return callable(getattr(obj, "read", None))


def from_file(factory: Callable[[], R], filename: str, *args: Any) -> ResourceLoader[R]:
    """Loader invoking ``load_from_file(filename[, arg])`` on a new resource."""
    if len(args) > 1:
        raise TypeError("from_file takes at most one additional argument")
    return make_resource_loader(
        factory,
        lambda resource: resource.load_from_file(filename, *args),
        make_tag("File", filename, *args),
    )


def from_memory(factory: Callable[[], R], *args: Any) -> ResourceLoader[R]:
    """Loader invoking ``load_from_memory(arg1, arg2[, arg3])`` on a new resource."""
    if len(args) not in (2, 3):
        raise TypeError("from_memory takes two or three arguments")
    return make_resource_loader(
        factory,
        lambda resource: resource.load_from_memory(*args),
        make_tag("Memory", *args),
    )


def from_stream(factory: Callable[[], R], *args: Any) -> ResourceLoader[R]:
    """Loader invoking ``load_from_stream(stream[, second])`` on a new resource.

    The second argument is either another stream (such as a fragment shader
    source) or an additional value.
    """
    if len(args) not in (1, 2):
        raise TypeError("from_stream takes one or two arguments")
    stream, *rest = args
    parts = [_address(stream)]
    parts += [_address(extra) if _looks_like_stream(extra) else extra for extra in rest]
    return make_resource_loader(
        factory,
        lambda resource: resource.load_from_stream(*args),
        make_tag("Stream", *parts),
    )


def from_samples(
    factory: Callable[[], R],
    samples: Any,
    sample_count: int,
    channel_count: int,
    sample_rate: int,
) -> ResourceLoader[R]:
    """Loader invoking ``load_from_samples(...)`` with an array of audio samples."""
    return make_resource_loader(
        factory,
        lambda resource: resource.load_from_samples(
            samples, sample_count, channel_count, sample_rate
        ),
        make_tag("Samples", _address(samples), sample_count, channel_count, sample_rate),
    )


def from_pixels(
    factory: Callable[[], R], width: int, height: int, pixels: Any
) -> ResourceLoader[R]:
    """Loader invoking ``create(width, height, pixels)``; always succeeds."""

    def fill(resource: R) -> bool:
        resource.create(width, height, pixels)
        return True

    return make_resource_loader(
        factory, fill, make_tag("Pixels", width, height, _address(pixels))
    )


def from_color(
    factory: Callable[[], R], width: int, height: int, color: Color
) -> ResourceLoader[R]:
    """Loader invoking ``create(width, height, color)``; always succeeds."""

    def fill(resource: R) -> bool:
        resource.create(width, height, color)
        return True

    return make_resource_loader(factory, fill, make_tag("Color", width, height, color))


def from_image(
    factory: Callable[[], R], image: Any, area: IntRect = IntRect()
) -> ResourceLoader[R]:
    """Loader invoking ``load_from_image(image, area)`` on a new resource."""
    return make_resource_loader(
        factory,
        lambda resource: resource.load_from_image(image, area),
        make_tag("Image", _address(image), area),
    )