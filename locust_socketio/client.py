"""
Socket.IO client capability used by the bridge.

Anything with ``emit``, ``timeout``, ``emit_with_ack`` and ``close`` can stand in
for a client; ``SocketClientAdapter`` provides them on top of python-socketio.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

import gevent
import socketio
from socketio.exceptions import SocketIOError, TimeoutError as AckTimeoutError

logger = logging.getLogger(__name__)

AckCallback = Callable[[Optional[List[Any]], Optional[BaseException]], None]


class SocketClientAdapter:
    def __init__(self, sio: socketio.Client, timeout: Optional[float] = None):
        self.sio = sio
        self._timeout = timeout

    def emit(self, event: str, *data: Any) -> None:
        if not data:
            payload = None
        elif len(data) == 1:
            payload = data[0]
        else:
            payload = tuple(data)
        self.sio.emit(event, payload)

    def timeout(self, seconds: float) -> "SocketClientAdapter":
        return SocketClientAdapter(self.sio, timeout=seconds)

    def emit_with_ack(self, event: str, data: Any, callback: AckCallback) -> None:
        once = threading.Lock()
        timer = None

        def deliver(values, error):
            if once.acquire(blocking=False):
                callback(values, error)

        def on_ack(*args):
            if timer is not None:
                timer.kill(block=False)
            deliver(list(args), None)

        if self._timeout is not None:
            timer = gevent.spawn_later(
                self._timeout, deliver, None, AckTimeoutError("operation has timed out")
            )
        try:
            self.sio.emit(event, data, callback=on_ack)
        except (SocketIOError, OSError) as e:
            if timer is not None:
                timer.kill(block=False)
            deliver(None, e)

    def close(self) -> None:
        self.sio.disconnect()


def default_connect(url: str, options: Optional[Dict[str, Any]] = None) -> SocketClientAdapter:
    sio = socketio.Client(reconnection=False)
    sio.connect(url, **(options or {}))
    logger.debug("connected to %s as sid=%s", url, sio.sid)
    return SocketClientAdapter(sio)


# Process-wide connect seam; tests swap it out.
connect_func: Callable[..., Any] = default_connect
