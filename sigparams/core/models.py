"""
Data models for the output bundle.

Uses frozen dataclasses: a bundle is built once per invocation and
only ever read by the renderers.
"""
from dataclasses import dataclass
from typing import List, Tuple

from .bignum import BarrettParameters
from .config import HASH_BYTES, PaddingScheme


@dataclass(frozen=True)
class SignatureBundle:
    """
    Everything the circuit needs to verify one signature.
    
    Attributes:
        message_hash: SHA-256 digest of the message (32 bytes)
        signature: Signature as a big-endian integer
        signature_limbs: Signature split at num_bits
        public_exponent: RSA public exponent e
        barrett: Modulus and reduction parameter in limb form
        padding: Padding scheme used to sign
        num_bits: Shared target bit width
    """
    message_hash: bytes
    signature: int
    signature_limbs: Tuple[int, ...]
    public_exponent: int
    barrett: BarrettParameters
    padding: PaddingScheme
    num_bits: int
    
    def __post_init__(self):
        if len(self.message_hash) != HASH_BYTES:
            raise ValueError(
                f"message_hash must be {HASH_BYTES} bytes, got {len(self.message_hash)}"
            )
    
    @property
    def modulus(self) -> int:
        return self.barrett.modulus
    
    @property
    def modulus_limbs(self) -> Tuple[int, ...]:
        return self.barrett.modulus_limbs
    
    @property
    def reduction_limbs(self) -> Tuple[int, ...]:
        return self.barrett.reduction_limbs
    
    @property
    def hash_values(self) -> List[int]:
        """Digest bytes as a list of ints."""
        return list(self.message_hash)
