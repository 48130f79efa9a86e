"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation: a request model in, a response model out.

    Requests carry the already-resolved viewer; use cases never touch HTTP
    state and leave authorization to the domain services they call.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """Run the operation."""
