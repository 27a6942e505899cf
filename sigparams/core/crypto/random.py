"""
Random byte sources for key generation and PSS salts.

A source is any callable taking a byte count and returning that many
bytes, the randfunc contract of pycryptodome.
"""
import random
from typing import Protocol

from Crypto.Random import get_random_bytes


class RandomSource(Protocol):
    """Protocol for random byte sources."""
    
    def __call__(self, n: int) -> bytes:
        """Return n random bytes."""
        ...


class SecureRandomSource:
    """Operating system CSPRNG (the default)."""
    
    def __call__(self, n: int) -> bytes:
        return get_random_bytes(n)


class SeededRandomSource:
    """
    Deterministic source for tests and reproducible runs.
    
    Not cryptographically secure: anyone who knows the seed can
    recover the private key.
    """
    
    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)
    
    def __call__(self, n: int) -> bytes:
        return self._rng.randbytes(n)


class CheckedRandomSource:
    """
    Wraps a source and rejects short reads.
    
    pycryptodome indexes into the returned bytes, so a short read would
    otherwise surface as an IndexError deep inside key generation.
    """
    
    def __init__(self, source: RandomSource):
        self.source = source
    
    def __call__(self, n: int) -> bytes:
        data = self.source(n)
        if len(data) != n:
            raise ValueError(f"Random source returned {len(data)} bytes, expected {n}")
        return data


# Errors a failing random source can surface through pycryptodome
RANDOM_SOURCE_ERRORS = (ValueError, TypeError, IndexError, OSError)
