"""Pytest fixtures for sigparams tests."""
import pytest

from sigparams.core.config import GeneratorConfig, PaddingScheme
from sigparams.core.crypto import RSAKeyGenerator, SeededRandomSource


@pytest.fixture(scope="session")
def rsa_key():
    """A 1025-bit RSA key shared by the whole session (key generation is slow)."""
    return RSAKeyGenerator(randfunc=SeededRandomSource(1234)).generate()


@pytest.fixture
def seeded_source():
    """Deterministic random source."""
    return SeededRandomSource(42)


@pytest.fixture
def message():
    return "hello world"


@pytest.fixture
def pkcs1_config():
    return GeneratorConfig(padding=PaddingScheme.PKCS1V15)


@pytest.fixture
def pss_config():
    return GeneratorConfig(padding=PaddingScheme.PSS)


@pytest.fixture
def modulus_1025():
    """An odd 1025-bit modulus (top bit set)."""
    return (1 << 1024) | 0x1f2e3d4c5b6a79881726354453627180f9e8d7c6b5a4938271605f4e3d2c1b0b
