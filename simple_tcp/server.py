import socket
import sys

from simple_tcp.errors import SetupError
from simple_tcp.log import log, report
from simple_tcp.settings import BACKLOG, BUFFER_SIZE, LISTEN_HOST, PORT, SERVER_RESPONSE


def open_listener(host=LISTEN_HOST, port=PORT, backlog=BACKLOG):
    """
    Create, configure, bind and start listening on an IPv4 stream socket.

    Raises:
        SetupError: labelled with the step that failed.
    """
    try:
        s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as e:
        raise SetupError("Socket creation failed", e) from e

    step = "Setsockopt failed"
    try:
        # Allow quick reuse of the port if the server restarts
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        step = "Bind failed"
        s.bind((host, port))
        step = "Listen failed"
        s.listen(backlog)
    except OSError as e:
        s.close()
        raise SetupError(step, e) from e
    return s


def serve_once(listener, response=SERVER_RESPONSE, bufsize=BUFFER_SIZE, out=None):
    """Accept exactly one client, read once, reply once, close both sockets."""
    with listener:
        try:
            conn, addr = listener.accept()
        except OSError as e:
            raise SetupError("Accept failed", e) from e

        with conn:
            print("Client connected", file=out)
            log(f"peer {addr}")

            # single read, length not checked; a failed read counts as empty
            try:
                data = conn.recv(bufsize)
            except OSError as e:
                log(f"read from {addr} failed: {e}", level="Warning")
                data = b""
            if not data:
                log(f"empty read from {addr}", level="Warning")
            log(f"read {len(data)} bytes")
            print(f"Received message: {data.decode(errors='replace')}", file=out)

            try:
                conn.send(response.encode())
            except OSError as e:
                log(f"send to {addr} failed: {e}", level="Warning")
            print(f"Response sent: {response}", file=out)
    return data


def run_server(host=LISTEN_HOST, port=PORT, backlog=BACKLOG, response=SERVER_RESPONSE, out=None):
    try:
        listener = open_listener(host, port, backlog)
        print(f"Server listening on port {port}", file=out)
        serve_once(listener, response, out=out)
    except SetupError as e:
        report(e)
        return -1
    return 0


def main():
    return run_server()


if __name__ == "__main__":
    sys.exit(main())
