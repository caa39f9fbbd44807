LISTEN_HOST = "0.0.0.0"   # all local IPv4 interfaces
PORT = 8080            # port number, same for server and client

BUFFER_SIZE = 1024     # max bytes taken by one recv()
BACKLOG = 3            # pending connections queued by listen()

CLIENT_MESSAGE = "Hello from client!"
SERVER_RESPONSE = "Hello from server!"
