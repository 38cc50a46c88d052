from .constants import ENCODING, ENCODING_LEN


def encode(value: int, length: int) -> str:
    """Encode a non-negative integer as `length` Crockford Base32 digits.

    Digits are most-significant first and left padded with "0". Exactly
    `length` digits are extracted, so digits above that width are dropped.
    Callers must not pass a negative value.
    """
    chars = []
    for _ in range(length):
        value, rem = divmod(value, ENCODING_LEN)
        chars.append(ENCODING[rem])
    return "".join(reversed(chars))


def max_value(length: int) -> int:
    return ENCODING_LEN ** length - 1
