import os
from typing import Any, Dict, Tuple

MODULE_NAME = os.getenv("SOCKETIO_MODULE_NAME", "socketio")
DEFAULT_HOST = os.getenv("SOCKETIO_HOST", "http://localhost:4000")
TRANSPORTS: Tuple[str, ...] = tuple(
    t.strip() for t in os.getenv("SOCKETIO_TRANSPORTS", "websocket,polling").split(",") if t.strip()
)
SOCKETIO_PATH = os.getenv("SOCKETIO_PATH", "socket.io")
CONNECT_WAIT_TIMEOUT = float(os.getenv("SOCKETIO_WAIT_TIMEOUT", "1"))
STRICT_EMIT = os.getenv("SOCKETIO_STRICT_EMIT", "").lower() in ("1", "true", "yes")

REQUEST_TYPE = "WS"
DEFAULT_ACK_TIMEOUT_MS = 2000


def connect_options(**overrides: Any) -> Dict[str, Any]:
    opts: Dict[str, Any] = {
        "transports": list(TRANSPORTS),
        "socketio_path": SOCKETIO_PATH,
        "wait_timeout": CONNECT_WAIT_TIMEOUT,
    }
    opts.update(overrides)
    return opts


def ack_timeout_ms(value: Any) -> int:
    # bool is an int subclass but never a timeout
    if isinstance(value, int) and not isinstance(value, bool):
        return max(value, 0)
    return DEFAULT_ACK_TIMEOUT_MS
