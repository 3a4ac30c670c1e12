from locust import between, task

from locust_socketio import SocketIOUser


class BasicSocketIOUser(SocketIOUser):
    weight = 3
    wait_time = between(1, 3)

    @task(3)
    def send_test(self):
        self.emit("test", {"bool": True, "test": "success"})

    @task(1)
    def ack_round_trip(self):
        res = self.emit_with_ack("ackevent", {"foo": "bar"})
        if isinstance(res, dict) and res.get("success") is not True:
            return
        self.emit("ping")
