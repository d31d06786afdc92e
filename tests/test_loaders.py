import io

import pytest

from thorkit.graphics import Color, IntRect, to_string
from thorkit.loaders import (
    ResourceLoader,
    from_color,
    from_file,
    from_image,
    from_memory,
    from_pixels,
    from_samples,
    from_stream,
    make_resource_loader,
    make_tag,
)


class FakeResource:
    """Records every load call; succeeds unless told otherwise."""

    succeed = True

    def __init__(self):
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, args))
        return type(self).succeed

    def load_from_file(self, *args):
        return self._record("file", *args)

    def load_from_memory(self, *args):
        return self._record("memory", *args)

    def load_from_stream(self, *args):
        return self._record("stream", *args)

    def load_from_samples(self, *args):
        return self._record("samples", *args)

    def load_from_image(self, *args):
        return self._record("image", *args)

    def create(self, *args):
        self.calls.append(("create", args))


class FailingResource(FakeResource):
    succeed = False


def test_resource_loader_load_and_info():
    loader = ResourceLoader(lambda: 42, "answer")
    assert loader.load() == 42
    assert loader.info() == "answer"


def test_make_tag_format():
    assert make_tag("File", "a.png") == "[FromFile] a.png"
    assert make_tag("Color", 2, 3, Color(1, 2, 3, 4)) == "[FromColor] 2; 3; (1,2,3,4)"


def test_make_tag_without_kind_and_trailing_separator():
    assert make_tag("", "x", "y") == "x; y"
    assert make_tag("", "x", "") == "x"


def test_make_tag_rect_uses_string_form():
    rect = IntRect(1, 2, 3, 4)
    assert make_tag("Image", rect) == "[FromImage] " + to_string(rect)


def test_make_resource_loader_success_and_failure():
    ok = make_resource_loader(list, lambda res: True, "k")
    assert ok.load() == []
    bad = make_resource_loader(list, lambda res: False, "k")
    assert bad.load() is None
    assert bad.info() == "k"


def test_from_file_calls_loader():
    loader = from_file(FakeResource, "tex.png")
    resource = loader.load()
    assert resource.calls == [("file", ("tex.png",))]
    assert loader.info() == make_tag("File", "tex.png")


def test_from_file_with_argument():
    rect = IntRect(0, 0, 8, 8)
    loader = from_file(FakeResource, "tex.png", rect)
    assert loader.load().calls == [("file", ("tex.png", rect))]
    assert loader.info() == "[FromFile] tex.png; " + to_string(rect)


def test_from_file_too_many_arguments():
    with pytest.raises(TypeError):
        from_file(FakeResource, "a", 1, 2)


def test_from_file_failure_returns_none():
    assert from_file(FailingResource, "missing.png").load() is None


def test_from_memory():
    data = b"\x00\x01"
    loader = from_memory(FakeResource, data, len(data))
    assert loader.load().calls == [("memory", (data, len(data)))]
    with pytest.raises(TypeError):
        from_memory(FakeResource, data)


def test_from_stream_same_stream_same_tag():
    stream = io.BytesIO(b"abc")
    first = from_stream(FakeResource, stream)
    second = from_stream(FakeResource, stream)
    assert first.info() == second.info()
    assert first.load().calls == [("stream", (stream,))]


def test_from_stream_distinct_streams_distinct_tags():
    a, b = io.BytesIO(), io.BytesIO()
    assert from_stream(FakeResource, a).info() != from_stream(FakeResource, b).info()


def test_from_stream_with_value_argument():
    stream = io.BytesIO()
    loader = from_stream(FakeResource, stream, "fragment")
    assert loader.info().endswith("; fragment")
    assert loader.load().calls == [("stream", (stream, "fragment"))]


def test_from_samples():
    samples = [0, 1, 2, 3]
    loader = from_samples(FakeResource, samples, 4, 2, 44100)
    assert loader.load().calls == [("samples", (samples, 4, 2, 44100))]
    assert loader.info().endswith("; 4; 2; 44100")


def test_from_pixels_always_succeeds():
    pixels = bytes(16)
    loader = from_pixels(FailingResource, 2, 2, pixels)
    resource = loader.load()
    assert resource.calls == [("create", (2, 2, pixels))]


def test_from_color():
    color = Color(10, 20, 30)
    loader = from_color(FakeResource, 5, 6, color)
    assert loader.load().calls == [("create", (5, 6, color))]
    assert loader.info() == make_tag("Color", 5, 6, color)


def test_from_image_default_area():
    image = object()
    loader = from_image(FakeResource, image)
    assert loader.load().calls == [("image", (image, IntRect()))]
    assert loader.info().endswith(to_string(IntRect()))