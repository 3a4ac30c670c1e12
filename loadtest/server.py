"""Minimal Socket.IO server for local runs of the load test (port 4000)."""

import logging
import os

import socketio
from gevent import pywsgi

logger = logging.getLogger("loadtest.server")

sio = socketio.Server(async_mode="gevent", cors_allowed_origins="*")
app = socketio.WSGIApp(sio)


@sio.event
def connect(sid, environ):
    logger.info("client connected: %s", sid)


@sio.on("*")
def any_event(event, sid, data=None):
    logger.info("event %s from %s: %r", event, sid, data)


@sio.on("test")
def on_test(sid, data=None):
    logger.info("test event: %r", data)
    sio.emit("test_response", {"received": True}, to=sid)


@sio.on("ackevent")
def on_ackevent(sid, data=None):
    logger.info("ackevent: %r", data)
    return {"success": True}


@sio.event
def disconnect(sid, *args):
    logger.info("client disconnected: %s", sid)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    port = int(os.getenv("PORT", "4000"))
    logger.info("Socket.IO server running on port %d", port)
    pywsgi.WSGIServer(("", port), app).serve_forever()
