"""HTTP implementation of the user gateway.

Talks to a reqres-style users service:

    GET    /users?page=&per_page=   -> {page, per_page, total, total_pages, data}
    GET    /users/{id}              -> {data: user}
    POST   /users                   -> creation acknowledgement
    PUT    /users/{id}              -> update acknowledgement
    DELETE /users/{id}              -> 204 No Content
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from directory.domain.aggregates import User
from directory.infrastructure.observability import DefaultGatewayProbe, GatewayProbe
from directory.ports.exceptions import (
    GENERIC_ERROR_MESSAGE,
    RequestError,
    UserNotFoundError,
)
from directory.ports.models import (
    CreateUserAck,
    UpdateUserAck,
    UserChanges,
    UserEnvelope,
    UserListResponse,
)
from directory.ports.notifications import INotifier, Notification

ModelT = TypeVar("ModelT", bound=BaseModel)


def extract_error_message(response: httpx.Response) -> str:
    """Pull a human-readable message out of an error response body.

    Looks at ``message`` first, then ``error``; falls back to a generic
    message when the body is not JSON or carries neither.
    """
    try:
        body = response.json()
    except ValueError:
        return GENERIC_ERROR_MESSAGE

    if isinstance(body, dict):
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value
    return GENERIC_ERROR_MESSAGE


class HttpUserGateway:
    """User gateway backed by a remote HTTP service.

    The gateway owns its ``httpx.AsyncClient`` unless one is injected.
    Use it as an async context manager, or call ``aclose()``, to release
    the connection pool.
    """

    def __init__(
        self,
        base_url: str,
        notifier: INotifier,
        api_key: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
        probe: GatewayProbe | None = None,
    ):
        """Initialize the gateway.

        Args:
            base_url: Address of the users service, e.g. https://reqres.in/api
            notifier: Channel that receives a notification for every failure
            api_key: Optional key sent in the x-api-key header
            timeout: Request timeout in seconds
            client: Pre-built client (tests inject one with a MockTransport)
            probe: Optional domain probe for observability
        """
        self._notifier = notifier
        self._probe = probe or DefaultGatewayProbe()
        self._owns_client = client is None
        if client is None:
            headers = {"Content-Type": "application/json"}
            if api_key:
                headers["x-api-key"] = api_key
            client = httpx.AsyncClient(base_url=base_url, headers=headers, timeout=timeout)
        self._client = client

    async def __aenter__(self) -> HttpUserGateway:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this gateway created it."""
        if self._owns_client:
            await self._client.aclose()

    async def list_page(self, page: int, per_page: int) -> UserListResponse:
        path = "/users"
        response = await self._request(
            "GET", path, params={"page": page, "per_page": per_page}
        )
        return self._parse(UserListResponse, response, "GET", path)

    async def get_one(self, user_id: int) -> User:
        path = f"/users/{user_id}"
        response = await self._request("GET", path, user_id=user_id)
        envelope = self._parse(UserEnvelope, response, "GET", path)
        return envelope.data.to_domain()

    async def create(self, changes: UserChanges) -> CreateUserAck:
        path = "/users"
        response = await self._request("POST", path, json=changes.to_payload())
        return self._parse(CreateUserAck, response, "POST", path)

    async def update(self, user_id: int, changes: UserChanges) -> UpdateUserAck:
        path = f"/users/{user_id}"
        response = await self._request(
            "PUT", path, json=changes.to_payload(), user_id=user_id
        )
        return self._parse(UpdateUserAck, response, "PUT", path)

    async def delete(self, user_id: int) -> None:
        await self._request("DELETE", f"/users/{user_id}", user_id=user_id)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        user_id: int | None = None,
    ) -> httpx.Response:
        """Send one request and turn every failure into a RequestError.

        A 404 on a single-user path becomes UserNotFoundError.
        """
        self._probe.request_issued(method=method, path=path)

        try:
            response = await self._client.request(method, path, params=params, json=json)
        except httpx.HTTPError as e:
            raise self._failure(
                RequestError(str(e) or "Network request failed"), method, path
            ) from e

        if not response.is_success:
            message = extract_error_message(response)
            if response.status_code == 404 and user_id is not None:
                error: RequestError = UserNotFoundError(
                    user_id,
                    message if message != GENERIC_ERROR_MESSAGE else None,
                )
            else:
                error = RequestError(message, status_code=response.status_code)
            raise self._failure(error, method, path)

        self._probe.request_succeeded(
            method=method, path=path, status_code=response.status_code
        )
        return response

    def _parse(
        self,
        model: type[ModelT],
        response: httpx.Response,
        method: str,
        path: str,
    ) -> ModelT:
        """Validate a success body against ``model``."""
        try:
            return model.model_validate_json(response.content or b"{}")
        except ValidationError as e:
            raise self._failure(
                RequestError("Unexpected response from users service", response.status_code),
                method,
                path,
            ) from e

    def _failure(self, error: RequestError, method: str, path: str) -> RequestError:
        """Report ``error`` on the probe and the notification channel."""
        self._probe.request_failed(
            method=method,
            path=path,
            message=error.message,
            status_code=error.status_code,
        )
        self._notifier.notify(Notification.failure(error.message))
        return error
