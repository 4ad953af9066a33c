"""One-time pad cipher with a key generator and TCP encryption and decryption servers and clients."""

__version__ = "0.1.0"