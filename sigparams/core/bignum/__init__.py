"""Big integer decomposition for circuit inputs."""
from .limbs import (
    LIMB_MASK,
    limb_count,
    limb_capacity,
    split_into_limbs,
    join_limbs,
    format_limb,
)
from .barrett import BarrettParameters, compute_barrett_reduction_parameter

__all__ = [
    'LIMB_MASK',
    'limb_count',
    'limb_capacity',
    'split_into_limbs',
    'join_limbs',
    'format_limb',
    'BarrettParameters',
    'compute_barrett_reduction_parameter',
]
