"""Clients that send text and key to a pad server and print the result."""

import re
import socket
import sys

from otpad.cipher import validate_text
from otpad.protocol import Mode, pack_size, recv_exactly, send_all

_HANDSHAKE_LIMIT = 999
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_TEXT_LABEL = {Mode.ENCRYPT: "plaintext", Mode.DECRYPT: "ciphertext"}


class ClientError(Exception):
    """A client run failed; ``exit_code`` is the status the command exits with."""

    def __init__(self, message, exit_code=1):
        super().__init__(message)
        self.exit_code = exit_code


def _parse_port(text):
    """Read a leading integer from ``text`` leniently; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def read_text(path):
    """Return the whole content of the file at ``path`` as text."""
    with open(path, "rb") as handle:
        return handle.read().decode("latin-1")


def _check_inputs(text, key, mode):
    if not validate_text(text):
        raise ClientError(f"Error: {_TEXT_LABEL[mode]} contains invalid characters")
    if not validate_text(key):
        raise ClientError("Error: key contains invalid characters")
    if len(key) < len(text):
        raise ClientError("Error: key is too short")


def run_client(text, key, port, mode, host="localhost"):
    """Have the server on ``host``:``port`` transform ``text`` with ``key``.

    Returns the server's answer. Raises ClientError with exit code 1 for
    bad input and exit code 2 for connection or handshake failures.
    """
    _check_inputs(text, key, mode)

    try:
        address = socket.gethostbyname(host)
    except OSError as exc:
        raise ClientError("CLIENT: ERROR, no such host", 2) from exc

    try:
        conn = socket.create_connection((address, port))
    except (OSError, OverflowError) as exc:
        raise ClientError(
            f"Error: could not contact otp_{mode.value}_d on port {port}", 2
        ) from exc

    with conn:
        send_all(conn, mode.client_id().encode("latin-1"))
        reply = conn.recv(_HANDSHAKE_LIMIT).decode("latin-1")
        if reply != mode.server_id():
            raise ClientError(f"Error: connected to wrong server type on port {port}", 2)

        send_all(conn, pack_size(len(text)))
        send_all(conn, text.encode("latin-1"))
        send_all(conn, key.encode("latin-1"))
        return recv_exactly(conn, len(text)).decode("latin-1")


def _main(argv, mode):
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print(f"USAGE: {mode.value}_client {_TEXT_LABEL[mode]} key port", file=sys.stderr)
        return 1
    text_path, key_path, port_text = args
    try:
        text = read_text(text_path)
        key = read_text(key_path)
    except OSError as exc:
        print(f"fopen: {exc.strerror or exc}", file=sys.stderr)
        return 1
    try:
        result = run_client(text, key, _parse_port(port_text), mode)
    except ClientError as exc:
        print(str(exc).replace(f"port {_parse_port(port_text)}", f"port {port_text}"),
              file=sys.stderr)
        return exc.exit_code
    except OSError as exc:
        print(f"CLIENT: ERROR during transfer: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(result)
    sys.stdout.flush()
    return 0


def enc_main(argv=None):
    """Run the encryption client."""
    return _main(argv, Mode.ENCRYPT)


def dec_main(argv=None):
    """Run the decryption client."""
    return _main(argv, Mode.DECRYPT)