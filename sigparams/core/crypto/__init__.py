"""Crypto module - hashing, key generation and signing."""
from .random import RandomSource, SecureRandomSource, SeededRandomSource, CheckedRandomSource
from .hashing import MessageHasher
from .keys import RSAKeyGenerator
from .signing import (
    SigningStrategy,
    PKCS1v15SigningStrategy,
    PSSSigningStrategy,
    create_signing_strategy,
)

__all__ = [
    'RandomSource',
    'SecureRandomSource',
    'SeededRandomSource',
    'CheckedRandomSource',
    'MessageHasher',
    'RSAKeyGenerator',
    'SigningStrategy',
    'PKCS1v15SigningStrategy',
    'PSSSigningStrategy',
    'create_signing_strategy',
]
