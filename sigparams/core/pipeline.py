"""
Signature pipeline.

Runs hash -> sign -> encode sequentially. Any failure aborts the whole
run; there is no partial bundle.
"""
import logging
from typing import Optional

from Crypto.PublicKey import RSA

from .bignum import BarrettParameters, split_into_limbs
from .config import GeneratorConfig
from .crypto import (
    MessageHasher,
    RandomSource,
    RSAKeyGenerator,
    SecureRandomSource,
    create_signing_strategy,
)
from .exceptions import KeyGenerationError
from .models import SignatureBundle


class SignaturePipeline:
    """
    Produces a SignatureBundle for a message.
    
    The random source is used for key generation and, with PSS, for
    the salt. A fresh SecureRandomSource is created per pipeline when
    none is given.
    
    Example:
        >>> pipeline = SignaturePipeline(GeneratorConfig())
        >>> bundle = pipeline.run("hello world")
        >>> len(bundle.signature_limbs)
        9
    """
    
    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        randfunc: Optional[RandomSource] = None,
        hasher: Optional[MessageHasher] = None
    ):
        self.config = config or GeneratorConfig()
        self.randfunc = randfunc or SecureRandomSource()
        self.hasher = hasher or MessageHasher()
        self.signer = create_signing_strategy(self.config.padding, self.randfunc)
        self._logger = logging.getLogger('sigparams.pipeline')
    
    def generate_key(self) -> RSA.RsaKey:
        """Generate a fresh keypair of config.key_bits bits."""
        generator = RSAKeyGenerator(
            bits=self.config.key_bits,
            public_exponent=self.config.public_exponent,
            randfunc=self.randfunc
        )
        return generator.generate()
    
    def sign(self, key: RSA.RsaKey, message: str | bytes) -> bytes:
        """Sign the SHA-256 digest of message with the configured padding."""
        signature = self.signer.sign(key, self.hasher.hash_object(message))
        self._logger.debug(f"{self.config.padding.value} signature: {len(signature)} bytes")
        return signature
    
    def encode(self, signature: bytes, key: RSA.RsaKey, message_hash: bytes) -> SignatureBundle:
        """Convert signature and modulus into limb form."""
        num_bits = self.config.target_bits
        signature_int = int.from_bytes(signature, byteorder='big')
        
        signature_limbs = split_into_limbs(signature_int, num_bits)
        barrett = BarrettParameters.from_modulus(int(key.n), num_bits)
        
        return SignatureBundle(
            message_hash=message_hash,
            signature=signature_int,
            signature_limbs=tuple(signature_limbs),
            public_exponent=int(key.e),
            barrett=barrett,
            padding=self.config.padding,
            num_bits=num_bits
        )
    
    def run(self, message: str | bytes, key: Optional[RSA.RsaKey] = None) -> SignatureBundle:
        """
        Hash, sign and encode message.
        
        Args:
            message: Message text (str is encoded as UTF-8)
            key: Existing private key; a new one is generated if omitted
            
        Returns:
            The complete output bundle
        """
        message_hash = self.hasher.digest(message)
        self._logger.debug(f"SHA-256 digest: {message_hash.hex()}")
        
        if key is None:
            key = self.generate_key()
        elif key.n.bit_length() > self.config.target_bits:
            raise KeyGenerationError(
                f"Key modulus has {key.n.bit_length()} bits, "
                f"exceeds target width of {self.config.target_bits}"
            )
        
        signature = self.sign(key, message)
        bundle = self.encode(signature, key, message_hash)
        
        self._logger.info(
            f"Signed message with {self.config.padding.value}, "
            f"{len(bundle.signature_limbs)} limbs per value"
        )
        return bundle
