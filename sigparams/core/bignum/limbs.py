"""
Fixed-width limb decomposition.

Big integers are handed to the circuit as little-endian sequences of
120-bit limbs. The sequence length depends only on the declared bit
width, never on the value, so high limbs may be zero.
"""
import logging
from typing import Iterable, List

from ..config import LIMB_BITS
from ..exceptions import LimbRangeError

logger = logging.getLogger(__name__)

LIMB_MASK = (1 << LIMB_BITS) - 1


def limb_count(num_bits: int) -> int:
    """Return ceil(num_bits / 120)."""
    if not isinstance(num_bits, int) or num_bits <= 0:
        raise LimbRangeError(
            f"Bit width must be a positive integer, got {num_bits!r}",
            num_bits=num_bits
        )
    return -(-num_bits // LIMB_BITS)


def limb_capacity(num_bits: int) -> int:
    """Return the number of bits a limb sequence for num_bits can hold."""
    return limb_count(num_bits) * LIMB_BITS


def split_into_limbs(value: int, num_bits: int) -> List[int]:
    """
    Split value into 120-bit limbs, least significant first.
    
    Args:
        value: Non-negative integer with value < 2**num_bits
        num_bits: Declared bit width of value
        
    Returns:
        Exactly limb_count(num_bits) limbs, each in [0, 2**120)
        
    Raises:
        LimbRangeError: If value is negative or does not fit in num_bits
    """
    count = limb_count(num_bits)
    
    if value < 0:
        raise LimbRangeError(
            "Cannot split negative value into limbs",
            num_bits=num_bits
        )
    if value >> num_bits:
        raise LimbRangeError(
            f"Value of {value.bit_length()} bits does not fit in {num_bits} bits",
            value_bits=value.bit_length(),
            num_bits=num_bits
        )
    
    limbs = [(value >> (LIMB_BITS * i)) & LIMB_MASK for i in range(count)]
    logger.debug(f"Split {value.bit_length()}-bit value into {count} limbs ({num_bits}-bit width)")
    return limbs


def join_limbs(limbs: Iterable[int]) -> int:
    """Reassemble an integer from little-endian 120-bit limbs."""
    value = 0
    for i, limb in enumerate(limbs):
        if limb < 0 or limb > LIMB_MASK:
            raise LimbRangeError(f"Limb {i} is outside [0, 2**{LIMB_BITS})")
        value |= limb << (LIMB_BITS * i)
    return value


def format_limb(limb: int) -> str:
    """Format a limb as unpadded lowercase hex with a 0x prefix."""
    return f"0x{limb:x}"
