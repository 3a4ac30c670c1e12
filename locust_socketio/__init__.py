# locust first: it monkey-patches the process with gevent before socketio loads
from .user import SocketIOUser
from .ack import TIMEOUT_REASON, AckWaiter, envelope, unwrap
from .bridge import SocketIOModule
from .client import SocketClientAdapter, default_connect
from .errors import AckFailure, ConnectError, EmitFailure, NotConnected, SocketIOBridgeError

__all__ = [
    "SocketIOUser",
    "SocketIOModule",
    "SocketClientAdapter",
    "default_connect",
    "AckWaiter",
    "TIMEOUT_REASON",
    "envelope",
    "unwrap",
    "SocketIOBridgeError",
    "ConnectError",
    "NotConnected",
    "EmitFailure",
    "AckFailure",
]
