"""
Airship API Client

Async HTTP client that sends validated requests to the API. Handles:
1. Authentication (basic app key / master secret, or bearer token)
2. Versioned Accept header
3. Retries on transport errors and 5xx responses
4. Mapping error responses to AirshipClientError

Example:
    async with AirshipClient(app_key="key", master_secret="secret") as client:
        response = await client.execute(CreateAndSendRequest.new_request(payload))
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel, Field
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from . import __version__
from .common.request import ApiRequest
from .config import ClientConfig

logger = logging.getLogger(__name__)

ACCEPT_HEADER = "application/vnd.urbanairship+json; version=3"
USER_AGENT = f"airship-push-python/{__version__}"


class AirshipClientError(Exception):
    """Error response from the API, or a request that never got one"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error: Optional[str] = None,
        details: Optional[Any] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.details = details

    @property
    def is_server_error(self) -> bool:
        return self.status_code is not None and self.status_code >= 500

    @classmethod
    def from_response(cls, response: httpx.Response) -> "AirshipClientError":
        error = response.text or response.reason_phrase
        details = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            error = body.get("error", error)
            details = body.get("details")
        return cls(
            f"API request failed with status {response.status_code}: {error}",
            status_code=response.status_code,
            error=error,
            details=details,
        )


class ApiResponse(BaseModel):
    """Successful API response"""
    status_code: int
    body: Optional[Any] = None
    headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        if isinstance(self.body, dict):
            return bool(self.body.get("ok", True))
        return True


def _is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TransportError):
        return True
    return isinstance(exc, AirshipClientError) and exc.is_server_error


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(f"Request attempt {retry_state.attempt_number} failed, retrying: {exc}")


class AirshipClient:
    """Async client for the push/email send API"""

    def __init__(
        self,
        app_key: Optional[str] = None,
        master_secret: Optional[str] = None,
        bearer_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        retry_wait: Optional[wait_base] = None
    ):
        """
        Initialize the client

        Args:
            app_key: Application key
            master_secret: Master secret, used for basic auth
            bearer_token: Bearer token, used instead of the master secret when set
            base_url: API base URL
            timeout: Request timeout in seconds
            max_retries: Maximum attempts per request, first attempt included
            config: Settings to fall back on, defaults to ``ClientConfig.from_env()``
            transport: httpx transport override
            retry_wait: tenacity wait strategy between attempts
        """
        config = config or ClientConfig.from_env()

        self.app_key = app_key or config.app_key
        self.master_secret = master_secret or config.master_secret
        self.bearer_token = bearer_token or config.bearer_token
        self.base_url = (base_url or config.base_url).rstrip('/')
        self.timeout = timeout if timeout is not None else config.timeout
        self.max_retries = max(1, max_retries if max_retries is not None else config.max_retries)
        self.retry_wait = retry_wait or wait_exponential(multiplier=1, min=1, max=10)

        if not self.app_key:
            raise ValueError("AirshipClient requires an app key")
        if not self.bearer_token and not self.master_secret:
            raise ValueError("AirshipClient requires a master secret or a bearer token")

        auth = None
        if not self.bearer_token:
            auth = httpx.BasicAuth(self.app_key, self.master_secret)

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self._build_default_headers(),
            auth=auth,
            transport=transport,
        )

        logger.debug(
            f"Initialized API client: {self.base_url} "
            f"(auth={'bearer' if self.bearer_token else 'basic'})"
        )

    def _build_default_headers(self) -> Dict[str, str]:
        headers = {
            "Accept": ACCEPT_HEADER,
            "User-Agent": USER_AGENT,
        }
        if self.bearer_token:
            headers["Authorization"] = f"Bearer {self.bearer_token}"
            headers["X-UA-Appkey"] = self.app_key
        return headers

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()
        logger.debug("Closed API client")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _send(self, request: ApiRequest) -> ApiResponse:
        logger.debug(f"Sending {request.http_method} {request.path}")
        response = await self.client.request(
            request.http_method,
            request.path,
            content=request.get_request_body(),
            headers={"Content-Type": request.content_type},
        )
        if response.is_error:
            raise AirshipClientError.from_response(response)

        body = None
        if response.content:
            try:
                body = response.json()
            except ValueError:
                body = response.text
        return ApiResponse(
            status_code=response.status_code,
            body=body,
            headers=dict(response.headers),
        )

    async def execute(self, request: ApiRequest) -> ApiResponse:
        """
        Send a request, retrying transport errors and 5xx responses

        Args:
            request: Request built from a validated payload

        Returns:
            ApiResponse for a 2xx response

        Raises:
            AirshipClientError: 4xx response, or retries exhausted
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=self.retry_wait,
            retry=retry_if_exception(_is_retryable),
            before_sleep=_log_retry,
            reraise=True,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    response = await self._send(request)
        except AirshipClientError as e:
            logger.error(f"{request.http_method} {request.path} failed: {e}")
            raise
        except httpx.TransportError as e:
            logger.error(f"{request.http_method} {request.path} failed after {self.max_retries} attempts: {e}")
            raise AirshipClientError(f"Transport error: {e}", error=str(e)) from e

        logger.debug(f"{request.http_method} {request.path} -> {response.status_code}")
        return response
