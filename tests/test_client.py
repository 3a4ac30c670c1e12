"""Tests for locust_socketio.client module."""

from unittest import mock

import gevent
import socketio
from socketio.exceptions import BadNamespaceError, ConnectionError as SioConnectionError

import pytest

from locust_socketio import client as client_module
from locust_socketio.client import SocketClientAdapter, default_connect


@pytest.fixture
def sio():
    return mock.Mock(spec=socketio.Client)


def _capture_ack(sio):
    """Return a list that receives the ack callback passed to sio.emit."""
    callbacks = []

    def emit(event, data=None, namespace=None, callback=None):
        callbacks.append(callback)

    sio.emit.side_effect = emit
    return callbacks


class TestAdapter:
    def test_emit_single(self, sio):
        SocketClientAdapter(sio).emit("foo", 123)
        sio.emit.assert_called_once_with("foo", 123)

    def test_emit_no_data(self, sio):
        SocketClientAdapter(sio).emit("ping")
        sio.emit.assert_called_once_with("ping", None)

    def test_emit_multiple_args_sent_as_tuple(self, sio):
        SocketClientAdapter(sio).emit("multi", 1, "a")
        sio.emit.assert_called_once_with("multi", (1, "a"))

    def test_timeout_returns_view_on_same_client(self, sio):
        adapter = SocketClientAdapter(sio)
        timed = adapter.timeout(0.042)
        assert timed is not adapter
        assert timed.sio is sio
        assert timed._timeout == pytest.approx(0.042)

    def test_emit_with_ack_delivers_values(self, sio):
        callbacks = _capture_ack(sio)
        got = []
        SocketClientAdapter(sio).timeout(1).emit_with_ack("ack", {"foo": "bar"}, lambda v, e: got.append((v, e)))
        callbacks[0]({"ack": True})
        assert got == [([{"ack": True}], None)]

    def test_emit_with_ack_without_timeout(self, sio):
        callbacks = _capture_ack(sio)
        got = []
        SocketClientAdapter(sio).emit_with_ack("ack", None, lambda v, e: got.append((v, e)))
        callbacks[0](1, 2)
        assert got == [([1, 2], None)]

    def test_inner_timeout_delivers_error_once(self, sio):
        callbacks = _capture_ack(sio)
        got = []
        SocketClientAdapter(sio).timeout(0.01).emit_with_ack("ack", None, lambda v, e: got.append((v, e)))
        gevent.sleep(0.05)
        callbacks[0]("late")
        assert len(got) == 1
        values, error = got[0]
        assert values is None
        assert isinstance(error, socketio.exceptions.TimeoutError)

    def test_ack_cancels_inner_timeout(self, sio):
        callbacks = _capture_ack(sio)
        got = []
        SocketClientAdapter(sio).timeout(0.02).emit_with_ack("ack", None, lambda v, e: got.append((v, e)))
        callbacks[0]("ok")
        gevent.sleep(0.05)
        assert got == [(["ok"], None)]

    def test_emit_error_goes_through_callback(self, sio):
        sio.emit.side_effect = BadNamespaceError("/ is not a connected namespace.")
        got = []
        SocketClientAdapter(sio).timeout(0.01).emit_with_ack("ack", None, lambda v, e: got.append((v, e)))
        gevent.sleep(0.03)
        assert len(got) == 1
        assert isinstance(got[0][1], BadNamespaceError)

    def test_close(self, sio):
        SocketClientAdapter(sio).close()
        sio.disconnect.assert_called_once_with()


class TestDefaultConnect:
    def test_connects_without_reconnection(self):
        with mock.patch.object(client_module.socketio, "Client") as client_cls:
            adapter = default_connect("http://localhost:4000", {"transports": ["websocket"]})
        client_cls.assert_called_once_with(reconnection=False)
        client_cls.return_value.connect.assert_called_once_with("http://localhost:4000", transports=["websocket"])
        assert isinstance(adapter, SocketClientAdapter)
        assert adapter.sio is client_cls.return_value

    def test_connect_error_propagates(self):
        with mock.patch.object(client_module.socketio, "Client") as client_cls:
            client_cls.return_value.connect.side_effect = SioConnectionError("refused")
            with pytest.raises(SioConnectionError):
                default_connect("http://localhost:1")

    def test_default_seam(self):
        assert client_module.connect_func is default_connect
