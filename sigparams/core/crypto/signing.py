"""
RSA signing strategies using Strategy Pattern.

Both strategies sign a SHA-256 hash object and return the raw
big-endian signature bytes.
"""
from abc import ABC, abstractmethod
from typing import Optional

from Crypto.PublicKey import RSA
from Crypto.Signature import pkcs1_15, pss

from ..config import PaddingScheme
from ..exceptions import SigningError
from .random import (
    RANDOM_SOURCE_ERRORS,
    CheckedRandomSource,
    RandomSource,
    SecureRandomSource,
)


class SigningStrategy(ABC):
    """Abstract base class for signing strategies."""
    
    scheme: PaddingScheme
    
    @abstractmethod
    def _signer(self, key: RSA.RsaKey):
        """Return a pycryptodome signer bound to key."""
        pass
    
    def sign(self, key: RSA.RsaKey, digest) -> bytes:
        """
        Sign a hash object.
        
        Raises:
            SigningError: If the key cannot sign or the library fails
        """
        if not key.has_private():
            raise SigningError("Signing requires a private key")
        try:
            return self._signer(key).sign(digest)
        except RANDOM_SOURCE_ERRORS as e:
            raise SigningError(f"{self.scheme.value} signing failed: {e}") from e


class PKCS1v15SigningStrategy(SigningStrategy):
    """Deterministic PKCS#1 v1.5 padding."""
    
    scheme = PaddingScheme.PKCS1V15
    
    def _signer(self, key: RSA.RsaKey):
        return pkcs1_15.new(key)


class PSSSigningStrategy(SigningStrategy):
    """Randomized PSS padding (MGF1-SHA256, salt length = digest length)."""
    
    scheme = PaddingScheme.PSS
    
    def __init__(self, randfunc: Optional[RandomSource] = None):
        """Initializes PSS strategy with the salt source."""
        self.randfunc = CheckedRandomSource(randfunc or SecureRandomSource())
    
    def _signer(self, key: RSA.RsaKey):
        return pss.new(key, rand_func=self.randfunc)


def create_signing_strategy(
    scheme: PaddingScheme,
    randfunc: Optional[RandomSource] = None
) -> SigningStrategy:
    """Return the strategy for scheme."""
    scheme = PaddingScheme(scheme)
    if scheme is PaddingScheme.PSS:
        return PSSSigningStrategy(randfunc)
    return PKCS1v15SigningStrategy()
