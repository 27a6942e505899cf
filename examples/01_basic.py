"""
Basic usage - Sign a message and print circuit inputs
"""
from sigparams import SignaturePipeline, get_renderer


def main():
    bundle = SignaturePipeline().run("hello world")
    
    print(f"Modulus: {bundle.modulus.bit_length()} bits")
    print(f"Limbs per value: {len(bundle.signature_limbs)}")
    
    print("\nPlain output:")
    print(get_renderer("plain").render(bundle))


if __name__ == "__main__":
    main()
