"""
Acknowledgement coordination for ``emitWithAck``.

A single ``AckWaiter`` arbitrates between the transport's ack callback and an
outer deadline so the caller gets exactly one result: the unwrapped ack value,
an error envelope, or the timeout envelope.
"""

import logging
from typing import Any, Dict, List, Optional

from gevent.queue import Empty, Full, Queue

TIMEOUT_REASON = "ack timeout"

ISSUED = "issued"
VALUE = "value"
ERROR = "error"
TIMEOUT = "timeout"


def envelope(reason: str) -> Dict[str, Any]:
    return {"success": False, "error": reason}


def unwrap(values: List[Any]) -> Any:
    if len(values) == 1:
        return values[0]
    return values


class AckWaiter:
    def __init__(
        self,
        event: str,
        timeout: float,
        logger: Optional[logging.Logger] = None,
        module_name: str = "socketio",
    ):
        self.event = event
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.module_name = module_name
        self.state = ISSUED
        self._result: Queue = Queue(maxsize=1)

    @property
    def done(self) -> bool:
        return self.state != ISSUED

    def deliver(self, values: Optional[List[Any]], error: Optional[BaseException]) -> None:
        """Ack callback handed to the client; never blocks the transport."""
        if error is not None:
            self.logger.debug("[%s] Ack callback for %s: error: %s", self.module_name, self.event, error)
            item = (ERROR, envelope(str(error)))
        else:
            self.logger.debug("[%s] Ack callback for %s: %r", self.module_name, self.event, values)
            item = (VALUE, list(values or []))
        if self.done:
            self.logger.debug("[%s] late ack for %s dropped", self.module_name, self.event)
            return
        try:
            self._result.put_nowait(item)
        except Full:
            self.logger.debug("[%s] duplicate ack for %s dropped", self.module_name, self.event)

    def wait(self) -> Any:
        try:
            kind, payload = self._result.get(timeout=self.timeout)
        except Empty:
            self.state = TIMEOUT
            return envelope(TIMEOUT_REASON)
        self.state = kind
        if kind == VALUE:
            return unwrap(payload)
        return payload
