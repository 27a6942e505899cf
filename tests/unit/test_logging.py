"""Tests for logging configuration."""
import logging

import pytest

from sigparams import setup_logging
from sigparams.core.bignum import limbs
from sigparams.core.crypto import keys


class TestModuleLoggers:
    """Module loggers are named after their modules."""
    
    def test_limbs_logger(self):
        assert limbs.logger.name == "sigparams.core.bignum.limbs"
    
    def test_keys_logger(self):
        assert keys.logger.name == "sigparams.core.crypto.keys"


class TestSetupLogging:
    """Test suite for setup_logging."""
    
    @pytest.fixture(autouse=True)
    def restore_levels(self):
        names = ["sigparams", "sigparams.pipeline", "sigparams.core.bignum.limbs"]
        levels = {name: logging.getLogger(name).level for name in names}
        yield
        for name, level in levels.items():
            logging.getLogger(name).setLevel(level)
    
    def test_sets_level(self):
        setup_logging(logging.DEBUG)
        
        assert logging.getLogger("sigparams.pipeline").level == logging.DEBUG
        assert logging.getLogger("sigparams.core.bignum.limbs").level == logging.DEBUG
    
    def test_propagates(self):
        setup_logging(logging.INFO)
        
        assert logging.getLogger("sigparams").propagate is True
    
    def test_pipeline_logs_debug(self, caplog, rsa_key):
        """Test pipeline stages log at DEBUG."""
        from sigparams.core.pipeline import SignaturePipeline
        
        setup_logging(logging.DEBUG)
        with caplog.at_level(logging.DEBUG, logger="sigparams.pipeline"):
            SignaturePipeline().run("hello world", key=rsa_key)
        
        assert any("SHA-256 digest" in r.message for r in caplog.records)
    
    def test_limb_split_logs_debug(self, caplog):
        from sigparams.core.bignum import split_into_limbs
        
        with caplog.at_level(logging.DEBUG, logger="sigparams.core.bignum.limbs"):
            split_into_limbs(5, 1025)
        
        assert any("9 limbs" in r.message for r in caplog.records)
