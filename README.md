# otpad

A one-time pad cipher over the 27-symbol alphabet `A`–`Z` plus space.
Encryption and decryption run as small TCP servers. Matching clients send a
text file and a key file to a server and print the result.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Generate a key

```
otpad-keygen 256 > mykey
```

This prints 256 random symbols from the alphabet, followed by a newline.
The length must be a positive integer. Otherwise the command prints an error
and exits with status 1.

## Start the servers

```
otpad-enc-server 57171 &
otpad-dec-server 57172 &
```

Each server listens on the given port on all interfaces. It serves clients
with a pool of five worker threads and runs until it is interrupted. The
decryption server prints a line to standard output for each connection it
takes. If the port cannot be bound, the server prints an error and exits with
status 1.

## Encrypt and decrypt

```
otpad-enc-client plaintext mykey 57171 > ciphertext
otpad-dec-client ciphertext mykey 57172 > plaintext_again
```

The clients always connect to `localhost`. The input files may contain only
uppercase letters, spaces and newlines. The key must be at least as long as
the text. A newline in the text passes through unchanged and is not
encrypted.

A client exits with status 1 for bad input: an unreadable file, invalid
characters, or a key that is too short. It exits with status 2 when it cannot
reach the server, or when the server on that port is the wrong kind. An
encryption client will not talk to a decryption server, and the other way
round.

## Protocol

A client sends its greeting (`enc_client` or `dec_client`). The server
answers with `enc_server` or `dec_server`. The client then sends the text
length as a 4-byte little-endian signed integer, the text, and the key. The
server reads as many key bytes as the text has, applies the cipher, and sends
back a result of the same length.

## As a library

```python
from otpad.cipher import encrypt, decrypt, validate_text

ciphertext = encrypt("HELLO WORLD\n", "XMCKLQWERTYZ")
assert decrypt(ciphertext, "XMCKLQWERTYZ") == "HELLO WORLD\n"
assert validate_text("HELLO WORLD\n")
```

Other pieces:

- `otpad.keygen.generate_key(length, rng=None)` returns a random key. `rng`
  may be any `random.Random`.
- `otpad.protocol.Mode` (`ENCRYPT`, `DECRYPT`) gives the handshake strings
  through `client_id()` and `server_id()`, and the cipher through
  `transform(message, key)`. `pack_size` and `unpack_size` handle the size
  header, and `send_all` and `recv_exactly` handle socket transfers.
  `unpack_size` raises `ProtocolError` for a malformed header.
- `otpad.server.serve(port, mode, workers=5)` runs a server.
  `handle_client(conn, mode)` serves one connection.
- `otpad.client.run_client(text, key, port, mode, host="localhost")` returns
  the server's answer. It raises `ClientError`, which carries an `exit_code`.
  `read_text(path)` reads a file as text.

## What it does not do

The cipher is only as strong as the key. `otpad-keygen` uses Python's
`random` module, which is not a cryptographically secure generator. Traffic
between client and server is not encrypted or authenticated.