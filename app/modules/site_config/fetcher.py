"""Runtime fetchers for the distributed header/footer configuration.

A ``ConfigFetcher`` keeps a local copy of one component's configuration,
optionally refreshed on a polling interval from a background thread. Fetch
failures never raise: the last good copy (or the supplied default) is kept
and the failure is reported through ``error`` and ``on_error``.

Fetches are numbered as they start. A response is applied only if no newer
fetch has been applied already, so a slow response cannot overwrite a
fresher one.

Usage:
    client = ConfigApiClient(base_url="http://localhost:8000")
    with ConfigFetcher(client, "header", default=fallback, polling_interval=30) as f:
        render(f.data)
"""

import threading
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from modules.site_config.client import ConfigApiClient

logger = get_module_logger()

Document = Dict[str, Any]


class FetchState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


def _extract_component(result: OperationResult, component: str) -> Document:
    """Pull ``component`` out of a successful snapshot response.

    Raises:
        ValueError: If the request failed or the payload lacks the component.
    """
    if not result.is_success:
        raise ValueError(result.message)
    payload = result.data
    if not isinstance(payload, dict):
        raise ValueError("Malformed configuration response")
    if payload.get("error"):
        raise ValueError(str(payload.get("message") or payload["error"]))
    if not isinstance(payload.get(component), dict):
        raise ValueError(f"No {component} configuration in response")
    return payload[component]


class ConfigFetcher:
    """Client-side holder of one component's configuration.

    Attributes:
        component: "header" or "footer"
        state: Current FetchState
        data: Last good configuration, or the default
        error: Message of the last failure, cleared on success
        last_updated: ``lastUpdated`` of the last applied snapshot
        version: ``version`` of the last applied snapshot
    """

    def __init__(
        self,
        client: ConfigApiClient,
        component: str,
        default: Optional[Document] = None,
        polling_interval: float = 0,
        enabled: bool = True,
        on_load: Optional[Callable[[Document], None]] = None,
        on_error: Optional[Callable[[str], None]] = None,
    ):
        self.client = client
        self.component = component
        self.default = default
        self.polling_interval = polling_interval
        self.enabled = enabled
        self.on_load = on_load
        self.on_error = on_error

        self.data: Optional[Document] = default
        self.error: Optional[str] = None
        self.last_updated: Optional[str] = None
        self.version: Optional[str] = None
        self.state = FetchState.READY if default is not None else FetchState.IDLE

        self._lock = threading.Lock()
        self._issued = 0
        self._applied = 0
        self._in_flight = 0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._logger = logger.bind(config_component=component)

    @property
    def is_loading(self) -> bool:
        return self._in_flight > 0

    @property
    def is_polling(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def fetch(self) -> None:
        """Fetch once and apply the outcome unless a newer fetch already landed.

        Held data stays readable while the state is ``loading``.
        """
        if not self.enabled:
            return

        with self._lock:
            self._issued += 1
            sequence = self._issued
            self._in_flight += 1
            self.state = FetchState.LOADING

        try:
            result, document, failure = self._request()
            applied = self._apply(sequence, result, document, failure)
        finally:
            with self._lock:
                self._in_flight -= 1

        if not applied:
            return
        if failure is None:
            self._logger.debug("config_fetched", version=self.version)
            if self.on_load:
                self.on_load(document)
        else:
            self._logger.warning("config_fetch_failed", error=failure)
            if self.on_error:
                self.on_error(failure)

    refetch = fetch

    def _request(self) -> Tuple[Optional[OperationResult], Optional[Document], Optional[str]]:
        try:
            result = self.client.get_config(self.component)
            return result, _extract_component(result, self.component), None
        except ValueError as e:
            return None, None, str(e)
        except Exception as e:  # pylint: disable=broad-except
            self._logger.error("config_fetch_raised", error=str(e), exc_info=True)
            return None, None, str(e) or type(e).__name__

    def _apply(
        self,
        sequence: int,
        result: Optional[OperationResult],
        document: Optional[Document],
        failure: Optional[str],
    ) -> bool:
        with self._lock:
            if sequence < self._applied:
                self._logger.debug(
                    "stale_config_response_discarded",
                    sequence=sequence,
                    applied=self._applied,
                )
                return False
            self._applied = sequence

            if failure is None:
                self.data = document
                self.error = None
                self.last_updated = result.data.get("lastUpdated")
                self.version = result.data.get("version")
                self.state = FetchState.READY
            else:
                if self.data is None:
                    self.data = self.default
                self.error = failure
                self.state = FetchState.READY if self.data is not None else FetchState.ERROR
            return True

    def start(self) -> None:
        """Run the first fetch and start polling when an interval is set."""
        if not self.enabled:
            return
        self.fetch()
        if self.polling_interval > 0 and not self.is_polling:
            self._stop_event.clear()
            self._thread = threading.Thread(
                target=self._poll,
                name=f"config-fetcher-{self.component}",
                daemon=True,
            )
            self._thread.start()
            self._logger.info("config_polling_started", interval=self.polling_interval)

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop polling. A fetch already in flight completes but is not rescheduled."""
        self._stop_event.set()
        thread = self._thread
        if thread is not None:
            # A callback on the polling thread may stop its own loop.
            if thread is not threading.current_thread():
                thread.join(timeout)
            self._thread = None
            self._logger.info("config_polling_stopped")

    def _poll(self) -> None:
        while not self._stop_event.wait(self.polling_interval):
            try:
                self.fetch()
            except Exception as e:  # pylint: disable=broad-except
                self._logger.error("config_poll_failed", error=str(e), exc_info=True)

    def __enter__(self) -> "ConfigFetcher":
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()


class ConfigAdminClient:
    """Read-modify-write access to one component, for admin tooling.

    ``update_config`` posts a partial document and then re-reads the snapshot
    so ``data`` reflects what the server stored. ``state`` moves through the
    same FetchState transitions as a ConfigFetcher.
    """

    def __init__(self, client: ConfigApiClient, component: str):
        self.client = client
        self.component = component
        self.data: Optional[Document] = None
        self.version: Optional[str] = None
        self.error: Optional[str] = None
        self.state = FetchState.IDLE

    @property
    def is_loading(self) -> bool:
        return self.state == FetchState.LOADING

    def _fail(self, message: str) -> None:
        self.error = message
        self.state = FetchState.READY if self.data is not None else FetchState.ERROR

    def fetch_config(self) -> OperationResult:
        self.state = FetchState.LOADING
        result = self.client.get_config(self.component)
        try:
            document = _extract_component(result, self.component)
        except ValueError as e:
            self._fail(str(e))
            logger.warning(
                "admin_config_fetch_failed",
                config_component=self.component,
                error=self.error,
            )
            if result.is_success:
                return OperationResult.permanent_error(
                    message=self.error, error_code="MALFORMED_RESPONSE"
                )
            return result

        self.data = document
        self.version = result.data.get("version")
        self.error = None
        self.state = FetchState.READY
        return OperationResult.success(data=self.data, message=result.message)

    def update_config(
        self, partial: Document, expected_version: Optional[str] = None
    ) -> OperationResult:
        """Post ``partial`` and re-fetch on success.

        Returns:
            The write's OperationResult (``version``/``lastUpdated`` in data).
        """
        self.state = FetchState.LOADING
        result = self.client.update_config(
            self.component, partial, expected_version=expected_version
        )

        if not result.is_success:
            self._fail(result.message)
            logger.warning(
                "admin_config_update_failed",
                config_component=self.component,
                status=result.status.value,
                error=result.message,
            )
            return result

        logger.info(
            "admin_config_updated",
            config_component=self.component,
            version=(result.data or {}).get("version"),
        )
        self.fetch_config()
        return result
