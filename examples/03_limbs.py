"""
Limb decomposition - Split a modulus and its Barrett parameter
"""
from sigparams import BarrettParameters, join_limbs, split_into_limbs


def main():
    modulus = (1 << 1024) + 12345
    
    params = BarrettParameters.from_modulus(modulus, 1025)
    print(f"Reduction parameter: {params.reduction_parameter.bit_length()} bits")
    
    for name, limbs in (("modulus", params.modulus_limbs), ("redc", params.reduction_limbs)):
        print(f"{name}: {[hex(limb) for limb in limbs]}")
    
    limbs = split_into_limbs(0xdeadbeef, 1025)
    print(f"\n0xdeadbeef -> {len(limbs)} limbs, rejoined {hex(join_limbs(limbs))}")


if __name__ == "__main__":
    main()
