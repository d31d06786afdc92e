import pytest

from thorkit.exceptions import (
    FunctionCallError,
    ResourceAccessError,
    ResourceLoadingError,
    StringConversionError,
    ThorError,
)


@pytest.mark.parametrize(
    "cls",
    [FunctionCallError, ResourceAccessError, ResourceLoadingError, StringConversionError],
)
def test_subclasses_are_caught_as_thor_error(cls):
    err = cls("something went wrong")
    assert issubclass(cls, ThorError)
    assert str(err) == "something went wrong"
    with pytest.raises(ThorError) as info:
        raise err
    assert info.value is err


def test_thor_error_is_runtime_error():
    err = ThorError("boom")
    assert issubclass(ThorError, RuntimeError)
    assert str(err) == "boom"


def test_distinct_classes_do_not_catch_each_other():
    assert not issubclass(ResourceLoadingError, ResourceAccessError)
    assert not issubclass(ResourceAccessError, ResourceLoadingError)
    err = ResourceLoadingError("load")
    assert str(err) == "load"


def test_message_preserved_in_args():
    err = ResourceAccessError("Failed to access resource")
    assert err.args == ("Failed to access resource",)