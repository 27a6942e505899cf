"""Tests for the command line interface."""
import tomllib

import pytest
from typer.testing import CliRunner

from sigparams.cli.main import app
from sigparams.core.crypto import SecureRandomSource
from sigparams.core.exceptions import KeyGenerationError, SigningError
from sigparams.core.pipeline import SignaturePipeline


@pytest.fixture
def runner():
    return CliRunner()


class TestGenerateCommand:
    """Test suite for the generate command."""
    
    def test_plain_output(self, runner):
        result = runner.invoke(app, ["--msg", "hello world", "--seed", "1"])
        
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0].startswith("let hash: [u8; 32] = [185, 77, ")
        assert lines[1].startswith("let signature: BN2048 = BigNum::from_array(")
        assert lines[-1] == "];"
    
    def test_toml_output(self, runner):
        result = runner.invoke(app, ["-m", "hello world", "-t", "--seed", "1"])
        
        assert result.exit_code == 0
        document = tomllib.loads(result.stdout)
        assert len(document["hash"]) == 32
        assert len(document["signature"]["limbs"]) == 9
        assert len(document["bn"]) == 2
    
    def test_pss_flag(self, runner):
        result = runner.invoke(app, ["-m", "hello world", "-p", "-t", "--seed", "1"])
        
        assert result.exit_code == 0
        assert len(tomllib.loads(result.stdout)["signature"]["limbs"]) == 9
    
    def test_seed_reproducible(self, runner):
        first = runner.invoke(app, ["-m", "abc", "--seed", "3"])
        second = runner.invoke(app, ["-m", "abc", "--seed", "3"])
        
        assert first.exit_code == 0
        assert first.stdout == second.stdout
    
    def test_verbose(self, runner):
        result = runner.invoke(app, ["-m", "abc", "-v", "--seed", "3"])
        
        assert result.exit_code == 0
    
    def test_missing_message(self, runner):
        """Test --msg is required."""
        result = runner.invoke(app, [])
        
        assert result.exit_code != 0
    
    def test_keygen_failure(self, runner, monkeypatch):
        """Test key generation failure exits non-zero with no bundle."""
        def fail(self):
            raise KeyGenerationError("not enough entropy")
        
        monkeypatch.setattr(SignaturePipeline, "generate_key", fail)
        result = runner.invoke(app, ["-m", "hello world"])
        
        assert result.exit_code == 1
        assert "keygen failed: not enough entropy" in result.output
        assert "let hash" not in result.output
    
    def test_signing_failure(self, runner, monkeypatch):
        def fail(self, key, message):
            raise SigningError("library fault")
        
        monkeypatch.setattr(SignaturePipeline, "sign", fail)
        result = runner.invoke(app, ["-m", "hello world", "--seed", "1"])
        
        assert result.exit_code == 1
        assert "sign failed: library fault" in result.output
    
    def test_entropy_failure(self, runner, monkeypatch):
        """Test a failing random source reports the keygen stage."""
        def fail(self, n):
            raise OSError("entropy source unavailable")
        
        monkeypatch.setattr(SecureRandomSource, "__call__", fail)
        result = runner.invoke(app, ["-m", "hello world"])
        
        assert result.exit_code == 1
        assert "keygen failed" in result.output
        assert "Traceback" not in result.output
    
    def test_unexpected_error_reported(self, runner, monkeypatch):
        """Test errors outside the taxonomy still exit 1 with a diagnostic."""
        def fail(self, message, key=None):
            raise RuntimeError("unexpected")
        
        monkeypatch.setattr(SignaturePipeline, "run", fail)
        result = runner.invoke(app, ["-m", "hello world"])
        
        assert result.exit_code == 1
        assert "generate failed: unexpected" in result.output
