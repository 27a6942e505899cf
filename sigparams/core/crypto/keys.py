"""RSA keypair generation."""
import logging
from typing import Optional

from Crypto.PublicKey import RSA

from ..config import PUBLIC_EXPONENT, TARGET_BITS
from ..exceptions import KeyGenerationError
from .random import (
    RANDOM_SOURCE_ERRORS,
    CheckedRandomSource,
    RandomSource,
    SecureRandomSource,
)

logger = logging.getLogger(__name__)


class RSAKeyGenerator:
    """Generates RSA keypairs with a caller-supplied random source."""
    
    def __init__(
        self,
        bits: int = TARGET_BITS,
        public_exponent: int = PUBLIC_EXPONENT,
        randfunc: Optional[RandomSource] = None
    ):
        """
        Initializes key generator.
        
        Args:
            bits: Exact modulus bit length
            public_exponent: Public exponent e
            randfunc: Random byte source (defaults to the OS CSPRNG)
        """
        self.bits = bits
        self.public_exponent = public_exponent
        self.randfunc = CheckedRandomSource(randfunc or SecureRandomSource())
    
    def generate(self) -> RSA.RsaKey:
        """
        Generate a keypair.
        
        Raises:
            KeyGenerationError: If the parameters are rejected or the
                random source fails
        """
        logger.debug(f"Generating {self.bits}-bit RSA key (e={self.public_exponent})")
        try:
            key = RSA.generate(self.bits, randfunc=self.randfunc, e=self.public_exponent)
        except RANDOM_SOURCE_ERRORS as e:
            raise KeyGenerationError(f"Failed to generate {self.bits}-bit RSA key: {e}") from e
        
        if key.n.bit_length() != self.bits:
            raise KeyGenerationError(
                f"Generated modulus has {key.n.bit_length()} bits, expected {self.bits}"
            )
        
        logger.info(f"Generated {self.bits}-bit RSA key")
        return key
