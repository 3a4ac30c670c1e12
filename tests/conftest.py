import logging

import pytest

import locust_socketio  # noqa: F401  (locust patches gevent in first)
from locust_socketio import SocketIOModule


class FakeSocketClient:
    def __init__(self, ack_handler=None):
        self.emitted = []
        self.acked = []
        self.timeout_seconds = None
        self.closed = False
        self.close_calls = 0
        self.close_error = None
        self.emit_error = None
        self.ack_handler = ack_handler

    def emit(self, event, *data):
        if self.emit_error is not None:
            raise self.emit_error
        self.emitted.append((event, data[0] if data else None))

    def timeout(self, seconds):
        self.timeout_seconds = seconds
        return self

    def emit_with_ack(self, event, data, callback):
        self.acked.append((event, data))
        if self.ack_handler is not None:
            self.ack_handler(event, data, callback)
        else:
            callback([{"ack": True}], None)

    def close(self):
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error
        self.closed = True


@pytest.fixture
def fake_client():
    return FakeSocketClient()


@pytest.fixture
def bridge(fake_client):
    return SocketIOModule(module_name="testmod", connect_func=lambda url, opts: fake_client)


@pytest.fixture
def connected(bridge):
    bridge.connect("ws://fake")
    return bridge


@pytest.fixture
def debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="locust_socketio")
    return caplog


@pytest.fixture
def make_fake():
    return FakeSocketClient
