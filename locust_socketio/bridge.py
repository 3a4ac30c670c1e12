import logging
import threading
from typing import Any, Callable, Dict, Optional

from socketio.exceptions import SocketIOError

from . import client as client_module
from .ack import AckWaiter
from .config import MODULE_NAME, STRICT_EMIT, ack_timeout_ms, connect_options
from .errors import ConnectError, EmitFailure, NotConnected


class SocketIOModule:
    """
    Per-user Socket.IO bridge.

    Holds at most one client. The lock guards the client reference only; it is
    never held while waiting on the server.
    """

    def __init__(
        self,
        module_name: str = MODULE_NAME,
        connect_func: Optional[Callable[..., Any]] = None,
        logger: Optional[logging.Logger] = None,
        strict_emit: bool = STRICT_EMIT,
    ):
        self.module_name = module_name
        self.logger = logger or logging.getLogger(__name__)
        self.strict_emit = strict_emit
        self._connect_func = connect_func
        self._client = None
        self._lock = threading.Lock()

    @property
    def client(self):
        with self._lock:
            return self._client

    def connect(self, url: str, **options: Any) -> None:
        self.logger.debug("[%s] Connect: url=%s", self.module_name, url)
        connect = self._connect_func or client_module.connect_func
        try:
            new_client = connect(url, connect_options(**options))
        except Exception as e:
            raise ConnectError(f"failed to connect to {url}: {e}") from e
        with self._lock:
            previous, self._client = self._client, new_client
        if previous is not None:
            self._close(previous)

    def emit(self, event: str, data: Any = None) -> None:
        self.logger.debug("[%s] Emit: event=%s, data=%r", self.module_name, event, data)
        with self._lock:
            if self._client is None:
                raise NotConnected()
            try:
                self._client.emit(event, data)
            except (SocketIOError, OSError) as e:
                if self.strict_emit:
                    raise EmitFailure(f"emit {event} failed: {e}") from e
                self.logger.debug("[%s] Emit %s failed: %s", self.module_name, event, e)

    def emit_with_ack(self, event: str, data: Any = None, timeout_ms: Any = None) -> Any:
        timeout_ms = ack_timeout_ms(timeout_ms)
        self.logger.debug(
            "[%s] EmitWithAck: event=%s, data=%r, timeout=%d", self.module_name, event, data, timeout_ms
        )
        with self._lock:
            if self._client is None:
                raise NotConnected()
            timed = self._client.timeout(timeout_ms / 1000.0)
        waiter = AckWaiter(event, timeout_ms / 1000.0, logger=self.logger, module_name=self.module_name)
        try:
            timed.emit_with_ack(event, data, waiter.deliver)
        except (SocketIOError, OSError) as e:
            waiter.deliver(None, e)
        return waiter.wait()

    def disconnect(self) -> None:
        with self._lock:
            previous, self._client = self._client, None
        if previous is not None:
            self._close(previous)

    def _close(self, client) -> None:
        try:
            client.close()
        except (SocketIOError, OSError) as e:
            self.logger.debug("[%s] Close failed: %s", self.module_name, e)

    def exports(self) -> Dict[str, Callable[..., Any]]:
        return {
            "connect": self.connect,
            "emit": self.emit,
            "emitWithAck": self.emit_with_ack,
            "disconnect": self.disconnect,
        }
