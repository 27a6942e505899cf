"""
sigparams - RSA signature parameters for arithmetic circuits.

Hashes a message, signs it with a fresh 1025-bit RSA key and emits the
digest, signature, modulus and Barrett reduction parameter as 120-bit
limbs.

Usage:
    >>> from sigparams import SignaturePipeline, get_renderer
    >>> 
    >>> bundle = SignaturePipeline().run("hello world")
    >>> print(get_renderer("toml").render(bundle))
"""
import logging

from .core.config import (
    GeneratorConfig,
    PaddingScheme,
    OutputFormat,
    LIMB_BITS,
    TARGET_BITS,
)
from .core.exceptions import (
    SigParamsError,
    KeyGenerationError,
    SigningError,
    LimbRangeError,
    ZeroModulusError,
)
from .core.bignum import (
    split_into_limbs,
    join_limbs,
    limb_count,
    compute_barrett_reduction_parameter,
    BarrettParameters,
)
from .core.crypto import SecureRandomSource, SeededRandomSource
from .core.models import SignatureBundle
from .core.pipeline import SignaturePipeline
from .core.render import get_renderer

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for sigparams modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'sigparams',
        'sigparams.pipeline',
        'sigparams.core.bignum.limbs',
        'sigparams.core.bignum.barrett',
        'sigparams.core.crypto.keys',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'GeneratorConfig',
    'PaddingScheme',
    'OutputFormat',
    'LIMB_BITS',
    'TARGET_BITS',
    'SigParamsError',
    'KeyGenerationError',
    'SigningError',
    'LimbRangeError',
    'ZeroModulusError',
    'split_into_limbs',
    'join_limbs',
    'limb_count',
    'compute_barrett_reduction_parameter',
    'BarrettParameters',
    'SecureRandomSource',
    'SeededRandomSource',
    'SignatureBundle',
    'SignaturePipeline',
    'get_renderer',
    'setup_logging',
]
