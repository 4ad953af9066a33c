import pytest

from otpad.cipher import ALPHABET, decrypt, encrypt, validate_text


def test_alphabet_order_is_capitals_then_space():
    # With an all-"A" message the ciphertext spells out the key positions.
    assert encrypt("A" * 27, ALPHABET) == "ABCDEFGHIJKLMNOPQRSTUVWXYZ "
    assert encrypt("A", "Z") == "Z"
    assert encrypt("A", " ") == " "
    assert decrypt("A", "A") == "A"


def test_encrypt_with_zero_key_is_identity():
    message = "THE RED GOOSE FLIES AT MIDNIGHT"
    assert encrypt(message, "A" * len(message)) == message


def test_encrypt_wraps_space_around():
    # space is position 26, B is 1: 27 wraps to 0
    assert encrypt(" ", "B") == "A"


def test_encrypt_shifts_by_key():
    assert encrypt("A", "B") == "B"


@pytest.mark.parametrize(
    "message,key",
    [
        ("HELLO WORLD", "XMCKLQWERTY"),
        ("THE QUICK BROWN FOX\n", "ZZZZZZZZZZZZZZZZZZZZZ"),
        ("   ", "ABC"),
        ("", "ABC"),
        ("A\nB\nC\n", "QQQQQQ"),
    ],
)
def test_round_trip(message, key):
    assert decrypt(encrypt(message, key), key) == message


def test_round_trip_every_pair():
    for m in ALPHABET:
        for k in ALPHABET:
            assert decrypt(encrypt(m, k), k) == m


def test_encrypt_preserves_length_and_newlines():
    message = "ABC\nDEF\n"
    key = "XYZXYZXYZ"
    result = encrypt(message, key)
    assert len(result) == len(message)
    assert result[3] == "\n"
    assert result[7] == "\n"


def test_decrypt_preserves_newlines():
    result = decrypt("AB\nCD", "QRSTU")
    assert result[2] == "\n"
    assert len(result) == 5


def test_key_longer_than_message_is_ignored_past_message():
    assert encrypt("HI", "QRSTUVW") == encrypt("HI", "QR")


def test_encrypt_output_stays_in_alphabet():
    result = encrypt("SOME TEXT HERE", "KEYKEYKEYKEYKE")
    assert validate_text(result)


def test_encrypt_treats_unknown_message_character_as_a():
    assert encrypt("a", "B") == encrypt("A", "B")


def test_encrypt_missing_key_character_counts_as_a():
    assert encrypt("HELLO", "") == "HELLO"


def test_decrypt_copies_unknown_characters():
    assert decrypt("a", "B") == "a"
    assert decrypt("Q", "b") == "Q"


@pytest.mark.parametrize("text", ["", "HELLO WORLD", "A\nB\n", " \n ", ALPHABET])
def test_validate_accepts_allowed_text(text):
    assert validate_text(text) is True


@pytest.mark.parametrize("text", ["hello", "HELLO!", "TAB\tHERE", "CR\r\n", "1234", "ÄB"])
def test_validate_rejects_other_characters(text):
    assert validate_text(text) is False