"""Result type shared by every tool operation.

An operation either succeeds with a value or fails with a message. The two
cases are separate classes so a failure can never carry data and a success
can never carry an error message.

Serialized form (the envelope seen by MCP clients):
    {"success": true, "data": ...}
    {"success": false, "errorMessage": "..."}
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying the operation's value."""

    data: T
    success: ClassVar[bool] = True


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying a human-readable message."""

    error_message: str
    success: ClassVar[bool] = False


Result = Union[Success[T], Failure]


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    return value


def to_envelope(result: "Result[Any]") -> dict[str, Any]:
    """Convert a result into the JSON envelope returned by tools.

    Pydantic models inside the data are dumped in JSON mode using their
    upstream field names (e.g. ``AQ_hourly_index``).
    """
    if isinstance(result, Success):
        return {"success": True, "data": _jsonable(result.data)}
    return {"success": False, "errorMessage": result.error_message}
