"""
Generator configuration.

Protocol constants shared with the downstream circuit plus the
per-invocation options selected on the command line.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Fixed by the circuit's bignum representation
LIMB_BITS = 120

# One bit beyond the nominal 1024-bit modulus
TARGET_BITS = 1025

PUBLIC_EXPONENT = 65537

# SHA-256 digest size
HASH_BYTES = 32

DEFAULT_BIGNUM_TYPE = "BN2048"


class PaddingScheme(str, Enum):
    """RSA signature padding schemes."""
    PKCS1V15 = "pkcs1v15"  # deterministic
    PSS = "pss"  # randomized salt


class OutputFormat(str, Enum):
    """Textual encodings of the output bundle."""
    PLAIN = "plain"
    TOML = "toml"


@dataclass
class GeneratorConfig:
    """
    Complete generator configuration.
    
    target_bits governs the limb count of every decomposition in one
    invocation: signature, modulus and reduction parameter share it.
    """
    target_bits: int = TARGET_BITS
    key_bits: Optional[int] = None
    public_exponent: int = PUBLIC_EXPONENT
    padding: PaddingScheme = PaddingScheme.PKCS1V15
    output_format: OutputFormat = OutputFormat.PLAIN
    
    # Type label used by the plain renderer
    bignum_type: str = DEFAULT_BIGNUM_TYPE
    
    log_level: int = logging.WARNING
    
    def __post_init__(self):
        if self.key_bits is None:
            self.key_bits = self.target_bits
        self.padding = PaddingScheme(self.padding)
        self.output_format = OutputFormat(self.output_format)
    
    @property
    def limb_count(self) -> int:
        """Number of limbs per decomposed value."""
        return -(-self.target_bits // LIMB_BITS)
    
    @classmethod
    def from_flags(cls, toml: bool = False, pss: bool = False, **kwargs) -> 'GeneratorConfig':
        """Build a config from the command-line boolean flags."""
        return cls(
            padding=PaddingScheme.PSS if pss else PaddingScheme.PKCS1V15,
            output_format=OutputFormat.TOML if toml else OutputFormat.PLAIN,
            **kwargs
        )
