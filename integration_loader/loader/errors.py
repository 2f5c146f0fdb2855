class LoaderError(Exception):
    """Base class for relationship resolution failures."""


class NotFoundError(LoaderError):
    def __init__(self, kind: str, name: str, namespace: str = "", message: str | None = None):
        self.kind: str = kind
        self.name: str = name
        self.namespace: str = namespace
        location = f"{namespace}/{name}" if namespace else name
        super().__init__(message or f"{kind} {location} not found")


class MissingReferenceError(NotFoundError):
    """The input object does not name the related object at all."""

    def __init__(self, kind: str, reference: str, owner: str):
        self.reference: str = reference
        self.owner: str = owner
        super().__init__(kind, "", message=f"{owner} does not reference a {kind} through {reference}")


class AmbiguousResultError(LoaderError):
    def __init__(self, kind: str, name: str, namespace: str = ""):
        self.kind: str = kind
        self.name: str = name
        self.namespace: str = namespace
        super().__init__(f"more than one {kind} matches {namespace}/{name}")


class MockNotConfiguredError(AssertionError):
    """A stub was registered for an operation without a resource or an error."""
