class SocketIOBridgeError(Exception):
    """Base class for errors surfaced to the calling script."""


class ConnectError(SocketIOBridgeError):
    pass


class NotConnected(SocketIOBridgeError):
    def __init__(self, message: str = "Socket.IO client not connected"):
        super().__init__(message)


class EmitFailure(SocketIOBridgeError):
    pass


class AckFailure(SocketIOBridgeError):
    """Recorded in Locust stats when an ack comes back as a failure envelope."""
