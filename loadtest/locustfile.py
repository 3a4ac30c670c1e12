"""
Socket.IO load test entry point

Usage:
  # start the local test server (port 4000)
  python loadtest/server.py

  # basic run (10 users, 2 minutes)
  locust -f loadtest/locustfile.py --host=http://localhost:4000 -u 10 -r 2 -t 2m --headless

  # Web UI mode
  locust -f loadtest/locustfile.py --host=http://localhost:4000

  # show bridge debug lines
  locust -f loadtest/locustfile.py --host=http://localhost:4000 --loglevel DEBUG

Environment variables:
  SOCKETIO_MODULE_NAME  - prefix used in logs and stats names (default: socketio)
  SOCKETIO_HOST         - target when --host is not given (default: http://localhost:4000)
  SOCKETIO_TRANSPORTS   - comma separated transports (default: websocket,polling)
  SOCKETIO_PATH         - server endpoint path (default: socket.io)
  SOCKETIO_WAIT_TIMEOUT - seconds to wait for the connection handshake (default: 1)
  SOCKETIO_STRICT_EMIT  - 1 to fail tasks when a plain emit fails (default: off)

User class weights:
  BasicSocketIOUser    - 75% (emit + ack round-trip)
  AdvancedSocketIOUser - 25% (mixed payloads)
"""

# Locust picks up every User class imported here
from ws_user import BasicSocketIOUser
from advanced_ws_user import AdvancedSocketIOUser

# To run a single user class, comment out the other import, e.g.:
# from ws_user import BasicSocketIOUser
