# xoshiro256** PRNG for reproducible sims (not for cryptographic use)
# Algorithm: David Blackman and Sebastiano Vigna, public domain reference
import logging
from dataclasses import dataclass, field
from typing import List

from .conversions import MASK64, double_cc, double_co, float_cc, float_co

logger = logging.getLogger(__name__)

DEFAULT_SEED = bytes(range(32))

# 2**128 jump polynomial, applied constant by constant, bit 0 first
JUMP = (0x180EC6D33CFD0ABA, 0xD5A61266F0C9392C, 0xA9582618E03FC9AA, 0x39ABDC4529B1661C)


def _rotl(x: int, k: int) -> int:
    return ((x << k) & MASK64) | (x >> (64 - k))


def _words_from_seed(seed: bytes) -> List[int]:
    # big-endian per 8-byte group, whatever the host byte order
    return [int.from_bytes(seed[i * 8:i * 8 + 8], "big") for i in range(4)]


@dataclass
class Xoshiro256:
    """xoshiro256** generator over four 64-bit words.

    An unseeded instance starts from ``DEFAULT_SEED``. Every output call
    mutates the state in place; a generator is also its own endless
    iterator over raw 64-bit words.
    """

    s: List[int] = field(default_factory=lambda: _words_from_seed(DEFAULT_SEED))

    @classmethod
    def from_seed(cls, seed: bytes) -> "Xoshiro256":
        gen = cls()
        gen.seed(seed)
        return gen

    def seed(self, seed: bytes) -> None:
        """Load 32 seed bytes into the state.

        Passing fewer than 32 bytes is not checked; the missing bytes simply
        never reach the state. An all-zero seed is the degenerate case and
        yields 0 forever.
        """
        self.s = _words_from_seed(seed)
        logger.debug("seeded state %s", self.to_bytes().hex())

    def next_u64(self) -> int:
        s = self.s
        result = (_rotl((s[1] * 5) & MASK64, 7) * 9) & MASK64
        t = (s[1] << 17) & MASK64

        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = _rotl(s[3], 45)

        return result

    def __iter__(self) -> "Xoshiro256":
        return self

    def __next__(self) -> int:
        return self.next_u64()

    def float_co(self) -> float:
        return float_co(self.next_u64())

    def float_cc(self) -> float:
        return float_cc(self.next_u64())

    def double_co(self) -> float:
        return double_co(self.next_u64())

    def double_cc(self) -> float:
        return double_cc(self.next_u64())

    def randint(self, a: int, b: int) -> int:
        """Uniform integer in a..b inclusive (mask and reject, no modulo bias)."""
        if b < a:
            raise ValueError(f"empty range for randint: {a}..{b}")
        span = b - a
        if span > MASK64:
            raise ValueError("randint range wider than 64 bits")
        mask = (1 << span.bit_length()) - 1
        while True:
            value = self.next_u64() & mask
            if value <= span:
                return a + value

    def jump(self) -> None:
        """Advance the state as if ``next_u64`` ran 2**128 times."""
        acc = [0, 0, 0, 0]
        for constant in JUMP:
            for b in range(64):
                if constant & (1 << b):
                    acc = [a ^ w for a, w in zip(acc, self.s)]
                self.next_u64()
        self.s = acc
        logger.debug("jumped to state %s", self.to_bytes().hex())

    def copy(self) -> "Xoshiro256":
        return Xoshiro256(list(self.s))

    def to_bytes(self) -> bytes:
        """Current state as the 32 seed bytes that reproduce it."""
        return b"".join(word.to_bytes(8, "big") for word in self.s)
