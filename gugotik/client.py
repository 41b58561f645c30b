"""HTTP client for communicating with the GuGoTik backend."""

import time
import uuid
from typing import Optional

import httpx

from gugotik.config import Config
from gugotik.constants import REQUEST_ID_HEADER, STATUS_OK
from gugotik.exceptions import ApiRequestError, BackendRejectionError
from gugotik.logging_config import get_logger

logger = get_logger(__name__)


class Client:
    """HTTP client for the GuGoTik API with retry logic and error handling."""

    def __init__(self, config: Optional[Config] = None, transport: Optional[httpx.BaseTransport] = None):
        """
        Initialize the client.

        Args:
            config: Configuration instance (defaults to ~/.gugotik/config.json)
            transport: Optional httpx transport, mainly for tests
        """
        self.config = config or Config()
        self.session = httpx.Client(
            base_url=self.config.get_endpoint(),
            timeout=self.config.get_timeout(),
            verify=not self.config.is_self_signed(),
            transport=transport,
        )
        logger.info(f"Initialized Client [endpoint={self.config.get_endpoint()}]")

    def __enter__(self) -> 'Client':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def calculate_upload_timeout(self, size: int) -> float:
        """
        Calculate timeout for an upload request based on its body size.

        Args:
            size: Body size in bytes

        Returns:
            Timeout in seconds (configured base + 0.1s per MB)
        """
        size_mb = size / (1024 * 1024)
        return float(self.config.get_timeout()) + size_mb * 0.1

    def _new_request_headers(self, headers: Optional[dict]) -> tuple[str, dict]:
        request_id = str(uuid.uuid4())
        merged = dict(headers or {})
        merged[REQUEST_ID_HEADER] = request_id
        return request_id, merged

    def _request_with_retry(
        self,
        method: str,
        path: str,
        max_retries: Optional[int] = None,
        **kwargs
    ) -> httpx.Response:
        """
        Make HTTP request with retry logic on 5xx errors and network failures.

        Args:
            method: HTTP method (GET, POST, DELETE, etc.)
            path: API path
            max_retries: Max retry attempts (uses config default if None)
            **kwargs: Additional arguments to pass to httpx request

        Returns:
            HTTP response object

        Raises:
            ApiRequestError: If the backend cannot be reached after all retries
        """
        retry_config = self.config.get_retry_config()
        max_retries = max_retries if max_retries is not None else retry_config['max_retries']
        backoff = retry_config['retry_backoff_multiplier']

        request_id, kwargs['headers'] = self._new_request_headers(kwargs.get('headers'))

        logger.debug(f"Making request: {method} {path} [request_id={request_id}]")

        last_exception = None
        for attempt in range(max_retries + 1):
            try:
                response = self.session.request(method, path, **kwargs)

                logger.debug(
                    f"Response received: {method} {path} status={response.status_code} [request_id={request_id}]"
                )

                if response.status_code >= 500 and attempt < max_retries:
                    delay = backoff ** attempt
                    logger.warning(
                        f"Server error (attempt {attempt + 1}/{max_retries + 1}): "
                        f"{method} {path} status={response.status_code}, retrying in {delay}s [request_id={request_id}]"
                    )
                    time.sleep(delay)
                    continue

                return response

            except (httpx.ConnectError, httpx.TimeoutException) as e:
                last_exception = e
                if attempt < max_retries:
                    delay = backoff ** attempt
                    logger.warning(
                        f"Network error (attempt {attempt + 1}/{max_retries + 1}): "
                        f"{method} {path} error={type(e).__name__}, retrying in {delay}s [request_id={request_id}]"
                    )
                    time.sleep(delay)
                    continue
                logger.error(
                    f"Network error (max retries exceeded): {method} {path} error={e} [request_id={request_id}]"
                )

        if isinstance(last_exception, httpx.TimeoutException):
            raise ApiRequestError("Request timed out. Server may be overloaded.") from last_exception
        raise ApiRequestError("Cannot connect to GuGoTik server. Is it running?") from last_exception

    def _format_error(self, response: httpx.Response) -> str:
        """
        Map HTTP errors to user-friendly messages.

        Args:
            response: HTTP response object

        Returns:
            User-friendly error message
        """
        try:
            detail = response.json().get('status_msg') or 'Unknown error'
        except (ValueError, AttributeError):
            detail = response.text if response.text else 'Unknown error'

        status_messages = {
            400: 'Bad request',
            401: 'Not authenticated',
            403: 'Access forbidden',
            404: 'Not found',
            413: 'Payload too large',
            416: 'Range not satisfiable',
            500: 'Server error',
            502: 'Bad gateway',
            503: 'Service unavailable',
        }

        message = status_messages.get(response.status_code, 'Request failed')
        return f"{message}: {detail}"

    def decode(self, response: httpx.Response) -> dict:
        """
        Decode a backend response into its JSON body.

        Args:
            response: HTTP response object

        Returns:
            Decoded JSON body

        Raises:
            ApiRequestError: On non-success HTTP status or a non-JSON body
            BackendRejectionError: If the body reports a non-zero status_code
        """
        if not response.is_success:
            request_id = response.request.headers.get(REQUEST_ID_HEADER)
            logger.warning(f"Request failed status={response.status_code} [request_id={request_id}]")
            raise ApiRequestError(
                self._format_error(response),
                status_code=response.status_code,
                response=response.text,
            )

        try:
            body = response.json()
        except ValueError:
            raise ApiRequestError("Malformed response: body is not JSON", response=response.text)

        if not isinstance(body, dict):
            raise ApiRequestError("Malformed response: expected a JSON object", response=response.text)

        status_code = body.get('status_code', STATUS_OK)
        if status_code != STATUS_OK:
            status_msg = body.get('status_msg') or 'Request rejected by backend'
            raise BackendRejectionError(status_msg, status_code=status_code, status_msg=status_msg)

        return body

    def call(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        data: Optional[dict] = None,
        files: Optional[dict] = None,
        headers: Optional[dict] = None,
        max_retries: Optional[int] = None,
    ) -> dict:
        """
        Perform one API call and return the decoded body.

        Args:
            method: HTTP method
            path: API path (e.g., "/douyin/feed/")
            params: Query parameters (None values are dropped)
            data: Form fields
            files: Multipart file parts
            headers: Extra headers
            max_retries: Override for the configured retry count

        Returns:
            Decoded JSON body
        """
        kwargs = {}
        if params:
            kwargs['params'] = {k: v for k, v in params.items() if v is not None}
        if data:
            kwargs['data'] = data
        if files:
            kwargs['files'] = files
        if headers:
            kwargs['headers'] = headers

        response = self._request_with_retry(method, path, max_retries=max_retries, **kwargs)
        return self.decode(response)

    def send_form(
        self,
        path: str,
        data: dict,
        files: dict,
        headers: Optional[dict] = None,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        """
        POST one multipart request exactly once.

        Upload transmissions go through here; they are never retried, and
        httpx errors propagate to the caller untouched.

        Args:
            path: API path
            data: Form fields
            files: Multipart file parts
            headers: Extra headers
            timeout: Per-request timeout in seconds

        Returns:
            HTTP response object
        """
        request_id, request_headers = self._new_request_headers(headers)
        logger.debug(f"Sending form: POST {path} [request_id={request_id}]")
        kwargs = {'data': data, 'files': files, 'headers': request_headers}
        if timeout is not None:
            kwargs['timeout'] = timeout
        return self.session.post(path, **kwargs)

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()
