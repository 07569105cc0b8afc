"""HTTP client for the configuration distribution endpoint.

Used by runtime fetchers and admin tooling to read and write the header/footer
snapshot of a running service. Every call returns an OperationResult; transport
failures and error responses are classified, never raised.

Usage:
    from modules.site_config.client import ConfigApiClient

    client = ConfigApiClient(base_url="http://localhost:8000")
    result = client.get_config("header")
    if result.is_success:
        header = result.data["header"]
"""

from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests
import structlog

from infrastructure.operations import OperationResult, OperationStatus

logger = structlog.get_logger(__name__)

CONFIG_PATH = "/api/config"
DEFAULT_RETRY_AFTER = 60

# Most specific first; ConnectTimeout is both a Timeout and a ConnectionError.
TRANSPORT_ERROR_CODES = (
    (requests.Timeout, "TIMEOUT"),
    (requests.ConnectionError, "CONNECTION_ERROR"),
    (requests.RequestException, "REQUEST_ERROR"),
)

STATUS_BY_CODE = {
    404: OperationStatus.NOT_FOUND,
    409: OperationStatus.CONFLICT,
}


class ConfigApiClient:
    """Session-backed client for ``/api/config``.

    Attributes:
        base_url: Base URL of the service exposing the endpoint
        timeout: Default timeout in seconds
    """

    def __init__(self, base_url: str = "http://localhost:8000", timeout: int = 10) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(
            {
                "User-Agent": "Site-Config-Client/1.0",
                "Accept": "application/json",
            }
        )
        self._logger = logger.bind(component="config_api_client")

    def get_config(self, component: Optional[str] = None) -> OperationResult:
        """Read the snapshot, optionally restricted to one component."""
        params = {"component": component} if component else None
        return self._request("GET", CONFIG_PATH, params=params)

    def update_config(
        self,
        component: str,
        config: Dict[str, Any],
        expected_version: Optional[str] = None,
    ) -> OperationResult:
        """Shallow-merge ``config`` into ``component`` on the server.

        Returns:
            OperationResult carrying ``{success, version, lastUpdated, message}``
            on success, CONFLICT when ``expected_version`` is stale.
        """
        body: Dict[str, Any] = {"component": component, "config": config}
        if expected_version is not None:
            body["expectedVersion"] = expected_version
        return self._request("POST", CONFIG_PATH, json_data=body)

    def get_resolved(
        self, component: str, locale: Optional[str] = None
    ) -> OperationResult:
        """Read the locale-resolved configuration of one component."""
        params = {"component": component}
        if locale:
            params["locale"] = locale
        return self._request("GET", f"{CONFIG_PATH}/resolved", params=params)

    def _request(
        self,
        method: str,
        path: str,
        json_data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> OperationResult:
        log = self._logger.bind(method=method, path=path)
        try:
            response = self._session.request(
                method=method,
                url=urljoin(self.base_url, path),
                json=json_data,
                params=params,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            error_code = next(
                code for kind, code in TRANSPORT_ERROR_CODES if isinstance(e, kind)
            )
            log.error("config_api_transport_error", error_code=error_code, error=str(e))
            return OperationResult.transient_error(
                message=f"{method} {path} failed: {str(e) or error_code}",
                error_code=error_code,
            )

        status_code = response.status_code
        payload = _json_body(response)
        log = log.bind(status_code=status_code)
        carries_error = isinstance(payload, dict) and bool(payload.get("error"))

        if 200 <= status_code < 300 and not carries_error:
            log.debug("config_api_success")
            return OperationResult.success(
                data=payload, message=f"{method} {path} succeeded"
            )

        message = _error_message(payload, response.text)
        log.warning("config_api_error", error=message)

        if 200 <= status_code < 300:
            return OperationResult.permanent_error(
                message=message, error_code="ERROR_PAYLOAD", data=payload
            )

        error_code = f"HTTP_{status_code}"
        if status_code in STATUS_BY_CODE:
            return OperationResult.error(
                status=STATUS_BY_CODE[status_code],
                message=message,
                error_code=error_code,
                data=payload,
            )
        if status_code == 429 or status_code >= 500:
            return OperationResult.transient_error(
                message=message,
                error_code=error_code,
                retry_after=_retry_after(response.headers.get("Retry-After")),
            )
        return OperationResult.permanent_error(
            message=message, error_code=error_code, data=payload
        )

    def close(self) -> None:
        """Close HTTP session and release connections."""
        self._session.close()
        self._logger.debug("config_api_client_closed")


def _json_body(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        logger.warning("non_json_response", content=response.text[:200])
        return None


def _error_message(payload: Any, text: str) -> str:
    if isinstance(payload, dict):
        for key in ("message", "error", "detail"):
            if payload.get(key):
                return str(payload[key])
    return text[:200] if text else "Unknown error"


def _retry_after(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return DEFAULT_RETRY_AFTER


__all__ = ["ConfigApiClient"]
