from typing import Any, Tuple


class PersistedQueryError(ValueError):
    """Base class for errors that abort query id generation."""


class MissingOperationNameError(PersistedQueryError):
    def __init__(self) -> None:
        super().__init__("OperationDefinition missing name")


class UnknownFragmentError(PersistedQueryError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown fragment: {name}")


class FragmentCycleError(PersistedQueryError):
    """A fragment spreads itself, directly or through other fragments."""

    def __init__(self, path: Tuple[str, ...]) -> None:
        self.path = path
        super().__init__(f"Fragment cycle: {' -> '.join(path)}")


class InvalidModeError(PersistedQueryError):
    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Output must be configured to 'server' or 'client', got {value!r}")
