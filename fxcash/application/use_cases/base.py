"""
Use case foundation for the application layer.

Every cash use case validates its request, runs against the cash book and
reports failures as an error response instead of raising, so a host engine
can keep running after a configuration mistake in one account.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar
from uuid import UUID, uuid4

TRequest = TypeVar("TRequest", bound="UseCaseRequest")
TResponse = TypeVar("TResponse", bound="UseCaseResponse")


@dataclass(kw_only=True)
class UseCaseRequest:
    """Fields shared by every request."""

    request_id: UUID = field(default_factory=uuid4)
    correlation_id: UUID | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class UseCaseResponse:
    """Outcome of a use case; ``error`` is set when ``success`` is False."""

    success: bool
    data: Any | None = None
    error: str | None = None
    request_id: UUID | None = None

    @classmethod
    def error_response(cls, error: str, request_id: UUID | None) -> "UseCaseResponse":
        return cls(success=False, error=error, request_id=request_id)


class UseCase(ABC, Generic[TRequest, TResponse]):
    """
    Template for request handling.

    Subclasses implement ``validate`` and ``process``; callers only use
    ``execute``.
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name or type(self).__name__
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    async def execute(self, request: TRequest) -> TResponse:
        """
        Run the use case for ``request``.

        A validation message or any exception raised while processing is
        logged and returned as an error response carrying the request id.
        """
        request_id = request.request_id
        log_extra = {"request_id": str(request_id), "use_case": self.name}
        self.logger.debug(f"Executing {self.name}", extra=log_extra)

        try:
            validation_error = await self.validate(request)
            if validation_error:
                self.logger.warning(
                    f"{self.name} rejected request: {validation_error}", extra=log_extra
                )
                return self._create_error_response(validation_error, request_id)

            return await self.process(request)

        except Exception as e:
            self.logger.error(f"{self.name} failed: {e}", extra=log_extra, exc_info=True)
            return self._create_error_response(str(e), request_id)

    @abstractmethod
    async def validate(self, request: TRequest) -> str | None:
        """Return an error message if the request cannot be processed."""

    @abstractmethod
    async def process(self, request: TRequest) -> TResponse:
        """Carry out the request."""

    def _create_error_response(self, error: str, request_id: UUID) -> TResponse:
        # Concrete responses only add defaulted fields, so the base shape suffices
        return UseCaseResponse.error_response(error, request_id)  # type: ignore[return-value]
