"""
Barrett reduction parameters.

The circuit reduces modulo N by multiplying with the precomputed
constant floor(2**(2k) / N) and shifting, where k is the shared target
bit width.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..exceptions import LimbRangeError, ZeroModulusError
from .limbs import limb_capacity, split_into_limbs

logger = logging.getLogger(__name__)


def compute_barrett_reduction_parameter(modulus: int, num_bits: Optional[int] = None) -> int:
    """
    Compute floor(2**(2 * num_bits) / modulus).
    
    Args:
        modulus: Positive modulus
        num_bits: Target bit width (defaults to the modulus bit length)
        
    Returns:
        The reduction parameter
        
    Raises:
        ZeroModulusError: If modulus is zero
    """
    if modulus == 0:
        raise ZeroModulusError("Cannot compute Barrett parameter for a zero modulus")
    if modulus < 0:
        raise LimbRangeError("Modulus must be positive", stage="barrett")
    
    if num_bits is None:
        num_bits = modulus.bit_length()
    
    return (1 << (2 * num_bits)) // modulus


@dataclass(frozen=True)
class BarrettParameters:
    """
    A modulus and its reduction parameter, both in limb form.
    
    For a num_bits-bit modulus the parameter takes up to num_bits + 1
    bits, so it is range-checked against the full limb capacity. Both
    limb sequences have the same length.
    """
    modulus: int
    reduction_parameter: int
    num_bits: int
    modulus_limbs: Tuple[int, ...]
    reduction_limbs: Tuple[int, ...]
    
    @classmethod
    def from_modulus(cls, modulus: int, num_bits: int) -> 'BarrettParameters':
        """Compute and split the reduction parameter for modulus."""
        reduction_parameter = compute_barrett_reduction_parameter(modulus, num_bits)
        modulus_limbs = split_into_limbs(modulus, num_bits)
        reduction_limbs = split_into_limbs(reduction_parameter, limb_capacity(num_bits))
        
        logger.debug(
            f"Barrett parameter: modulus {modulus.bit_length()} bits, "
            f"parameter {reduction_parameter.bit_length()} bits, "
            f"{len(modulus_limbs)} limbs each"
        )
        return cls(
            modulus=modulus,
            reduction_parameter=reduction_parameter,
            num_bits=num_bits,
            modulus_limbs=tuple(modulus_limbs),
            reduction_limbs=tuple(reduction_limbs)
        )
