"""Key derivation for named System V shared-memory segments."""

_INT32 = 1 << 32
_UINT64 = 1 << 64


def gen_hash_key(name: str) -> int:
    """Hash ``name`` (djb2 over its UTF-8 bytes) to a signed 32-bit key.

    Bytes are taken as signed chars, the hash wraps at 64 bits, and the
    result keeps only its low 32 bits.
    """
    value = 5381
    for byte in name.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        value = (value * 33 + char) % _UINT64
    key = value % _INT32
    return key - _INT32 if key >= _INT32 // 2 else key