import math


def _to_int32(value):
    value = int(value) & 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def hash_string(text):
    """Polynomial rolling hash (``hash * 31 + char``) with a 32-bit shift."""
    value = 0
    for char in text:
        shifted = _to_int32(_to_int32(value) << 5)
        value = ord(char) + (shifted - value)
    return abs(value)


class SeededRandom:
    """Deterministic number stream for palette generation.

    Not cryptographically random. Two instances built from the same seed yield
    the same draws in the same order; construct a new one per generation call.
    """

    def __init__(self, seed):
        if isinstance(seed, str):
            self.seed = hash_string(seed)
        else:
            self.seed = seed

    def next(self):
        """Float in [0, 1)."""
        x = math.sin(self.seed) * 10000
        self.seed += 1
        return x - math.floor(x)

    def next_int(self, low, high):
        """Integer in [low, high], both ends inclusive."""
        return math.floor(self.next() * (high - low + 1)) + low

    def next_float(self, low, high):
        return self.next() * (high - low) + low

    def pick(self, items):
        items = list(items)
        return items[self.next_int(0, len(items) - 1)]
