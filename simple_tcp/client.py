import socket
import sys

from simple_tcp.errors import SetupError
from simple_tcp.log import log, report
from simple_tcp.settings import BUFFER_SIZE, CLIENT_MESSAGE, PORT


def parse_address(text):
    """Check that text is a dotted-decimal IPv4 address, as inet_pton does."""
    try:
        socket.inet_pton(socket.AF_INET, text)
    except (OSError, ValueError) as e:
        raise SetupError("Invalid address", e) from e
    return text


def connect(server_ip, port=PORT):
    try:
        s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as e:
        raise SetupError("Socket creation failed", e) from e

    try:
        parse_address(server_ip)
    except SetupError:
        s.close()
        raise

    try:
        s.connect((server_ip, port))
    except OSError as e:
        s.close()
        raise SetupError("Connection failed", e) from e
    return s


def exchange(sock, message=CLIENT_MESSAGE, bufsize=BUFFER_SIZE, out=None):
    """Send the message once, read the reply once, close the socket."""
    with sock:
        try:
            sock.send(message.encode())
        except OSError as e:
            log(f"send failed: {e}", level="Warning")
        print(f"Message sent: {message}", file=out)

        # single read, length not checked; a failed read counts as empty
        try:
            data = sock.recv(bufsize)
        except OSError as e:
            log(f"read failed: {e}", level="Warning")
            data = b""
        if not data:
            log("server closed without replying", level="Warning")
        log(f"read {len(data)} bytes")
        print(f"Server response: {data.decode(errors='replace')}", file=out)
    return data


def run_client(server_ip, port=PORT, message=CLIENT_MESSAGE, out=None):
    try:
        sock = connect(server_ip, port)
    except SetupError as e:
        report(e)
        return -1

    print(f"Connected to server {server_ip}:{port}", file=out)
    exchange(sock, message, out=out)
    return 0


def main(argv=None):
    if argv is None:
        argv = sys.argv
    if len(argv) != 2:
        print(f"Usage: {argv[0] if argv else 'client'} <server_ip>")
        return 1
    return run_client(argv[1])


if __name__ == "__main__":
    sys.exit(main())
