from .errors import (
    AmbiguousResultError,
    LoaderError,
    MissingReferenceError,
    MockNotConfiguredError,
    NotFoundError,
)
from .loader import Loader, ObjectLoader
from .loader_mock import UNSET, MockData, MockKey, MockLoader

__all__ = [
    "AmbiguousResultError",
    "LoaderError",
    "MissingReferenceError",
    "MockNotConfiguredError",
    "NotFoundError",
    "Loader",
    "ObjectLoader",
    "MockData",
    "MockKey",
    "MockLoader",
    "UNSET",
]
