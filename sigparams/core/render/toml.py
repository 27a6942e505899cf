"""
TOML output for circuit prover inputs.

Layout:
    bn = [ [modulus limbs], [reduction limbs], ]   (pretty-printed)
    hash = [32 byte values]
    [signature]
    limbs = [signature limbs]

Limbs are quoted hex strings since TOML integers stop at 64 bits.
"""
from typing import Iterable, List

from ..bignum import format_limb
from ..models import SignatureBundle

INDENT = "    "


def format_limbs_as_toml_value(limbs: Iterable[int]) -> List[str]:
    """Quote each limb as a TOML string."""
    return [f'"{format_limb(limb)}"' for limb in limbs]


def format_inline_array(values: Iterable[str]) -> str:
    return f"[{', '.join(values)}]"


def format_pretty_array(rows: List[List[str]]) -> str:
    """Format an array of arrays one element per line."""
    lines = ["["]
    for row in rows:
        lines.append(f"{INDENT}[")
        lines.extend(f"{INDENT * 2}{value}," for value in row)
        lines.append(f"{INDENT}],")
    lines.append("]")
    return "\n".join(lines)


class TomlRenderer:
    """Renders the bundle as a TOML document."""
    
    def render(self, bundle: SignatureBundle) -> str:
        bn = format_pretty_array([
            format_limbs_as_toml_value(bundle.modulus_limbs),
            format_limbs_as_toml_value(bundle.reduction_limbs),
        ])
        hash_bytes = format_inline_array(str(b) for b in bundle.hash_values)
        signature = format_inline_array(format_limbs_as_toml_value(bundle.signature_limbs))
        
        lines = [
            f"bn = {bn}",
            f"hash = {hash_bytes}",
            "",
            "[signature]",
            f"limbs = {signature}",
        ]
        return "\n".join(lines)
