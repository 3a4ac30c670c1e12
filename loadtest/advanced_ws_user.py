import time

import gevent
from locust import between, task

from locust_socketio import SocketIOUser


class AdvancedSocketIOUser(SocketIOUser):
    weight = 1
    wait_time = between(2, 5)

    @task
    def mixed_payloads(self):
        self.emit("ping", {"timestamp": int(time.time() * 1000)})
        self.emit("message", "Hello from locust!")
        self.emit("number", 42)
        self.emit("complex", {"arr": [1, 2, 3], "obj": {"foo": "bar"}, "flag": False})
        # binary simulated with base64
        self.emit("binary", {"data": "SGVsbG8gQmluYXJ5IQ=="})
        for i in range(5):
            self.emit("loop", {"idx": i, "time": int(time.time() * 1000)})
            gevent.sleep(0.05)
        self.emit_with_ack("ackevent", {"foo": "bar"}, 1000)
        gevent.sleep(0.2)
