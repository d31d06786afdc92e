"""Exception hierarchy shared by the whole package."""


class ThorError(RuntimeError):
    """Base class of every error raised by this package."""


class FunctionCallError(ThorError):
    """Raised when a dispatched function call cannot be carried out."""


class ResourceLoadingError(ThorError):
    """Raised when a resource fails to load."""


class ResourceAccessError(ThorError):
    """Raised when a resource is accessed that is not (or is already) stored."""


class StringConversionError(ThorError):
    """Raised when a value cannot be converted to or from its string form."""