"""
Custom exceptions for signature parameter generation.

Every error here is fatal: the CLI reports the failing stage and exits
non-zero without writing any output.
"""
from typing import Optional


class SigParamsError(Exception):
    """Base exception for all sigparams errors."""
    
    default_stage: Optional[str] = None
    
    def __init__(self, message: str, stage: Optional[str] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            stage: Pipeline stage that failed (defaults to the class stage)
        """
        self.stage = stage or self.default_stage
        super().__init__(message)


class KeyGenerationError(SigParamsError):
    """Raised when the RSA keypair cannot be generated."""
    default_stage = "keygen"


class SigningError(SigParamsError):
    """Raised when the signature library fails to sign the digest."""
    default_stage = "sign"


class LimbRangeError(SigParamsError, ValueError):
    """Raised when a value does not fit in its declared bit width."""
    default_stage = "encode"
    
    def __init__(
        self,
        message: str,
        value_bits: Optional[int] = None,
        num_bits: Optional[int] = None,
        stage: Optional[str] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            value_bits: Bit length of the offending value (if known)
            num_bits: Declared bit width (if known)
            stage: Pipeline stage that failed
        """
        self.value_bits = value_bits
        self.num_bits = num_bits
        super().__init__(message, stage)


class ZeroModulusError(SigParamsError, ZeroDivisionError):
    """Raised when a Barrett parameter is requested for a zero modulus."""
    default_stage = "barrett"
