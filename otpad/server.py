"""Encryption and decryption servers for the one-time pad protocol."""

import re
import socket
import sys
import threading

from otpad.protocol import (
    SIZE_LENGTH,
    Mode,
    ProtocolError,
    recv_exactly,
    send_all,
    unpack_size,
)

_HANDSHAKE_LIMIT = 15
_BACKLOG = 5
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_port(text):
    """Read a leading integer from ``text`` leniently; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def handle_client(conn, mode):
    """Serve one connection: handshake, receive message and key, reply.

    The connection is closed afterwards in every case. Returns the text
    sent back. Raises ProtocolError if the peer is not a client of ``mode``
    or sends a malformed size header.
    """
    try:
        greeting = conn.recv(_HANDSHAKE_LIMIT).decode("latin-1")
        if greeting != mode.client_id():
            raise ProtocolError(f"rejected connection from unknown client: {greeting!r}")
        send_all(conn, mode.server_id().encode("latin-1"))

        size = unpack_size(recv_exactly(conn, SIZE_LENGTH))
        message = recv_exactly(conn, size).decode("latin-1")
        key = recv_exactly(conn, size).decode("latin-1")

        result = mode.transform(message, key)
        send_all(conn, result.encode("latin-1"))
        return result
    finally:
        conn.close()


def _worker(listener, mode):
    """Accept and handle connections until the listening socket is closed."""
    name = threading.current_thread().name
    while listener.fileno() != -1:
        try:
            conn, _address = listener.accept()
        except OSError as exc:
            if listener.fileno() == -1:
                break
            print(f"ERROR on accept: {exc}", file=sys.stderr)
            continue
        if mode is Mode.DECRYPT:
            print(f"Worker {name}: Handling new connection...", flush=True)
        try:
            handle_client(conn, mode)
        except ProtocolError:
            print("SERVER: Rejected connection from unknown client", file=sys.stderr)
        except OSError as exc:
            print(f"SERVER: ERROR during transfer: {exc}", file=sys.stderr)


def serve(port, mode, workers=5):
    """Listen on ``port`` and serve clients of ``mode`` with a pool of workers.

    Blocks for as long as the workers run. Raises OSError if the port
    cannot be bound.
    """
    if workers < 1:
        raise ValueError("workers must be at least 1")
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    with listener:
        listener.bind(("", port))
        listener.listen(_BACKLOG)
        pool = [
            threading.Thread(target=_worker, args=(listener, mode), daemon=True)
            for _ in range(workers)
        ]
        for thread in pool:
            thread.start()
        for thread in pool:
            thread.join()


def _main(argv, mode):
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(f"USAGE: {mode.value}_server port", file=sys.stderr)
        return 1
    try:
        serve(_parse_port(args[0]), mode)
    except OverflowError as exc:
        print(f"ERROR on binding: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"ERROR on binding: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


def enc_main(argv=None):
    """Run the encryption server."""
    return _main(argv, Mode.ENCRYPT)


def dec_main(argv=None):
    """Run the decryption server."""
    return _main(argv, Mode.DECRYPT)