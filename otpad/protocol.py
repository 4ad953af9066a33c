"""Wire protocol shared by the encryption and decryption clients and servers."""

import enum
import struct

from otpad.cipher import decrypt, encrypt

_SIZE = struct.Struct("<i")
SIZE_LENGTH = _SIZE.size
_MAX_SIZE = 2**31 - 1


class ProtocolError(Exception):
    """The peer sent something the protocol does not allow."""


class Mode(enum.Enum):
    """Which side of the pad a connection works on."""

    ENCRYPT = "enc"
    DECRYPT = "dec"

    def client_id(self):
        """Handshake greeting a client of this mode sends."""
        return f"{self.value}_client"

    def server_id(self):
        """Handshake reply a server of this mode sends."""
        return f"{self.value}_server"

    def transform(self, message, key):
        """Apply this mode's cipher operation."""
        if self is Mode.ENCRYPT:
            return encrypt(message, key)
        return decrypt(message, key)


def send_all(sock, data):
    """Send all of ``data``; return the number of bytes sent.

    Stops early if the socket accepts nothing more.
    """
    view = memoryview(data)
    total = 0
    while total < len(view):
        sent = sock.send(view[total:])
        if sent == 0:
            break
        total += sent
    return total


def recv_exactly(sock, length):
    """Receive ``length`` bytes, or fewer if the peer closes first."""
    received = bytearray()
    while len(received) < length:
        chunk = sock.recv(length - len(received))
        if not chunk:
            break
        received += chunk
    return bytes(received)


def pack_size(size):
    """Encode a message size as the 4-byte header that precedes the payload."""
    if not 0 <= size <= _MAX_SIZE:
        raise ValueError(f"message size out of range: {size}")
    return _SIZE.pack(size)


def unpack_size(data):
    """Decode the 4-byte size header."""
    if len(data) != SIZE_LENGTH:
        raise ProtocolError(f"size header must be {SIZE_LENGTH} bytes, got {len(data)}")
    (size,) = _SIZE.unpack(data)
    if size < 0:
        raise ProtocolError(f"negative message size: {size}")
    return size