import enum
from typing import Any

from ..errors import InvalidModeError


class OutputMode(enum.Enum):
    """What the generated mapping is keyed by.

    CLIENT: operation name -> digest, shipped with the client build.
    SERVER: digest -> canonical query text, registered on the server.
    """

    CLIENT = "client"
    SERVER = "server"

    @classmethod
    def from_value(cls, value: Any) -> "OutputMode":
        if isinstance(value, cls):
            return value
        for mode in cls:
            if mode.value == value:
                return mode
        raise InvalidModeError(value)
