"""Plain-text output as circuit source statements."""
from typing import Iterable

from ..bignum import format_limb
from ..config import DEFAULT_BIGNUM_TYPE, HASH_BYTES
from ..models import SignatureBundle


def format_limbs_as_hex(limbs: Iterable[int]) -> str:
    """Join limbs as comma-separated 0x-prefixed hex."""
    return ", ".join(format_limb(limb) for limb in limbs)


def format_bignum(limbs: Iterable[int]) -> str:
    """Render limbs as a BigNum::from_array(...) constructor call."""
    return f"BigNum::from_array([{format_limbs_as_hex(limbs)}])"


class PlainRenderer:
    """
    Renders the bundle as three let-statements.
    
    Example output:
        let hash: [u8; 32] = [185, 77, ...];
        let signature: BN2048 = BigNum::from_array([0x..., ...]);
        let bn = [
            [0x..., ...],
            [0x..., ...]
        ];
    """
    
    def __init__(self, bignum_type: str = DEFAULT_BIGNUM_TYPE):
        self.bignum_type = bignum_type
    
    def render(self, bundle: SignatureBundle) -> str:
        hash_bytes = ", ".join(str(b) for b in bundle.hash_values)
        lines = [
            f"let hash: [u8; {HASH_BYTES}] = [{hash_bytes}];",
            f"let signature: {self.bignum_type} = {format_bignum(bundle.signature_limbs)};",
            "let bn = [",
            f"    [{format_limbs_as_hex(bundle.modulus_limbs)}],",
            f"    [{format_limbs_as_hex(bundle.reduction_limbs)}]",
            "];",
        ]
        return "\n".join(lines)
