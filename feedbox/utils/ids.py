import random
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def now_ms() -> int:
    return int(time.time() * 1000)


def gen_id(prefix: str = "id", taken=None) -> str:
    """Return ``<prefix>_<8 base-36 chars>_<epoch ms>``, avoiding ids in ``taken``."""
    taken = taken or ()
    while True:
        suffix = "".join(random.choices(_ALPHABET, k=8))
        candidate = f"{prefix}_{suffix}_{now_ms()}"
        if candidate not in taken:
            return candidate
