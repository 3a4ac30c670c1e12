import time
from typing import Any, Callable, Optional

from locust import User

from .bridge import SocketIOModule
from .config import DEFAULT_HOST, MODULE_NAME, REQUEST_TYPE
from .errors import AckFailure, SocketIOBridgeError


def _is_failure_envelope(result: Any) -> bool:
    return isinstance(result, dict) and result.get("success") is False and "error" in result


class SocketIOUser(User):
    """
    Locust user owning one Socket.IO bridge.

    Every bridge call goes through ``call`` so it shows up in Locust stats.
    """

    abstract = True
    module_name: str = MODULE_NAME
    connect_func: Optional[Callable[..., Any]] = None
    auto_connect = True

    def __init__(self, environment):
        super().__init__(environment)
        # read through the class so a plain function is not bound as a method
        self.socketio = SocketIOModule(module_name=self.module_name, connect_func=type(self).connect_func)
        self.exports = self.socketio.exports()

    def on_start(self):
        if self.auto_connect:
            self.connect()

    def on_stop(self):
        self.disconnect()

    def record(self, name: str, start: float, length: int = 0, exception: Optional[Exception] = None):
        self.environment.events.request.fire(
            request_type=REQUEST_TYPE,
            name=name,
            response_time=(time.perf_counter() - start) * 1000,
            response_length=length,
            exception=exception,
        )

    def call(self, op: str, *args: Any) -> Any:
        fn = self.exports[op]
        name = f"{self.module_name}.{op}"
        if op in ("emit", "emitWithAck") and args:
            name = f"{name}:{args[0]}"
        start = time.perf_counter()
        try:
            result = fn(*args)
        except SocketIOBridgeError as e:
            self.record(name, start, exception=e)
            raise
        if op != "emitWithAck":
            self.record(name, start)
            return result
        exception = AckFailure(result["error"]) if _is_failure_envelope(result) else None
        self.record(name, start, length=len(repr(result)), exception=exception)
        return result

    def connect(self, url: Optional[str] = None) -> None:
        self.call("connect", url or self.host or DEFAULT_HOST)

    def emit(self, event: str, data: Any = None) -> None:
        self.call("emit", event, data)

    def emit_with_ack(self, event: str, data: Any = None, timeout_ms: Any = None) -> Any:
        return self.call("emitWithAck", event, data, timeout_ms)

    def disconnect(self) -> None:
        self.call("disconnect")
