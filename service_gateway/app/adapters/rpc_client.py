"""
Common RPC plumbing for the gateway's backend clients.
"""

import time
from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from shared.base_service import REQUEST_ID_HEADER
from shared.errors import (
    BackendCallError,
    BackendUnavailableError,
    ErrorResponse,
    InvalidInputError,
    NotFoundError,
)
from shared.logging import get_logger, get_request_id
from shared.metrics import MetricsCollector

ModelT = TypeVar("ModelT", bound=BaseModel)


class RpcClient:
    """Issues one bounded POST per RPC and normalises every failure.

    Domain conditions reported by the backend (NOT_FOUND, INVALID_INPUT) are
    re-raised as the matching shared error. Everything else becomes a
    BackendCallError or BackendUnavailableError.
    """

    service_name = "backend"

    def __init__(self, base_url: str, timeout: float = 5.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 metrics: Optional[MetricsCollector] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.transport = transport
        self.metrics = metrics
        self.logger = get_logger(f"gateway.{self.service_name}_client")

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self.transport)

    def _headers(self):
        request_id = get_request_id()
        return {REQUEST_ID_HEADER: request_id} if request_id else {}

    def _record(self, operation: str, outcome: str, duration: float) -> None:
        if self.metrics is None:
            return
        self.metrics.increment_counter(
            "backend_calls_total", backend=self.service_name, operation=operation, outcome=outcome
        )
        self.metrics.get_metric("backend_call_duration_seconds").labels(
            backend=self.service_name, operation=operation
        ).observe(duration)

    async def _call(self, operation: str, request: BaseModel, response_model: Type[ModelT]) -> ModelT:
        """Invoke ``/rpc/<operation>`` and decode the reply into ``response_model``."""
        start_time = time.time()
        try:
            async with self._http_client() as client:
                response = await client.post(
                    f"/rpc/{operation}",
                    json=request.model_dump(mode="json"),
                    headers=self._headers()
                )
        except httpx.TimeoutException as exc:
            self._record(operation, "timeout", time.time() - start_time)
            self.logger.error("Backend call timed out", operation=operation, url=self.base_url, error=repr(exc))
            raise BackendUnavailableError(
                self.service_name, "call timed out", details={"operation": operation}
            ) from exc
        except httpx.HTTPError as exc:
            self._record(operation, "unavailable", time.time() - start_time)
            self.logger.error("Backend unreachable", operation=operation, url=self.base_url, error=repr(exc))
            raise BackendUnavailableError(
                self.service_name, str(exc), details={"operation": operation}
            ) from exc

        duration = time.time() - start_time
        if response.status_code != 200:
            self._record(operation, str(response.status_code), duration)
            raise self._error_from(operation, response)

        try:
            result = response_model.model_validate(response.json())
        except ValueError as exc:
            self._record(operation, "malformed", duration)
            self.logger.error(
                "Backend returned a malformed payload",
                operation=operation,
                body=response.text,
                error=str(exc)
            )
            raise BackendCallError(
                self.service_name, "malformed response", details={"operation": operation}
            ) from exc

        self._record(operation, "ok", duration)
        return result

    def _error_from(self, operation: str, response: httpx.Response) -> Exception:
        """Translate a non-200 backend reply into a shared error."""
        try:
            error = ErrorResponse.model_validate(response.json())
        except ValueError:
            error = None

        if error is not None and error.code == "NOT_FOUND":
            return NotFoundError(error.message, details=error.details)
        if error is not None and error.code == "INVALID_INPUT":
            return InvalidInputError(error.message, details=error.details)

        self.logger.error(
            "Backend call failed",
            operation=operation,
            status_code=response.status_code,
            body=response.text
        )
        return BackendCallError(
            self.service_name,
            f"unexpected status {response.status_code}",
            details={"operation": operation, "status_code": response.status_code}
        )

    async def ping(self) -> bool:
        """Return True when the backend health endpoint answers 200."""
        try:
            async with self._http_client() as client:
                response = await client.get("/health", headers=self._headers())
        except httpx.HTTPError as exc:
            self.logger.warning("Backend health check failed", url=self.base_url, error=repr(exc))
            return False
        return response.status_code == 200
