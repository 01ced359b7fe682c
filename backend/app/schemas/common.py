"""Response envelope and shared field types."""

from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, StringConstraints

T = TypeVar("T")

TaxId = Annotated[str, StringConstraints(strip_whitespace=True, pattern=r"^\d{14}$")]


class ApiResponse(BaseModel, Generic[T]):
    """Body of every API response."""

    success: bool = True
    message: str
    data: T | None = None

    model_config = {"from_attributes": True}


class ServiceResponse(Generic[T]):
    """What service operations return; rendered through ``ApiResponse[Out]``."""

    __slots__ = ("success", "message", "data")

    def __init__(self, message: str, data: T | None = None, success: bool = True) -> None:
        self.success = success
        self.message = message
        self.data = data

    def __repr__(self) -> str:
        return f"ServiceResponse(success={self.success!r}, message={self.message!r})"
