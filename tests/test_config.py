"""
Tests for server and client configuration
"""
import os
from unittest.mock import patch

from seam_rpc.config import ClientConfig, ServerConfig


class TestServerConfig:
    """Test server configuration"""

    def test_default_values(self):
        config = ServerConfig()
        assert config.bind_address == "tcp://*:5555"
        assert config.reply_timeout_ms == 30000
        assert config.service_name == "seam_rpc.server"
        assert config.enable_tracing is False
        assert config.otlp_endpoint == "localhost:4317"

    def test_from_env_defaults(self):
        with patch.dict(os.environ, clear=True):
            assert ServerConfig.from_env() == ServerConfig()

    def test_from_env(self):
        with patch.dict(os.environ, {
            "SEAM_RPC_BIND_ADDRESS": "ipc:///tmp/seam.sock",
            "SEAM_RPC_REPLY_TIMEOUT_MS": "1500",
            "SEAM_RPC_SERVICE_NAME": "billing",
            "SEAM_RPC_ENABLE_TRACING": "true",
            "SEAM_RPC_OTLP_ENDPOINT": "collector:4317"
        }):
            config = ServerConfig.from_env()
            assert config.bind_address == "ipc:///tmp/seam.sock"
            assert config.reply_timeout_ms == 1500
            assert config.service_name == "billing"
            assert config.enable_tracing is True
            assert config.otlp_endpoint == "collector:4317"

    def test_tracing_flag_false_values(self):
        with patch.dict(os.environ, {"SEAM_RPC_ENABLE_TRACING": "0"}):
            assert ServerConfig.from_env().enable_tracing is False

    def test_config_to_dict(self):
        config_dict = ServerConfig(bind_address="tcp://*:6000").to_dict()

        assert config_dict["bind_address"] == "tcp://*:6000"
        assert set(config_dict) == {
            "bind_address", "reply_timeout_ms", "service_name", "enable_tracing", "otlp_endpoint"
        }


class TestClientConfig:
    """Test client configuration"""

    def test_default_values(self):
        config = ClientConfig()
        assert config.server_address == "tcp://localhost:5555"
        assert config.timeout_ms == 5000

    def test_from_env(self):
        with patch.dict(os.environ, {
            "SEAM_RPC_SERVER_ADDRESS": "tcp://10.0.0.5:5555",
            "SEAM_RPC_TIMEOUT_MS": "250"
        }):
            config = ClientConfig.from_env()
            assert config.server_address == "tcp://10.0.0.5:5555"
            assert config.timeout_ms == 250
            assert config.to_dict() == {"server_address": "tcp://10.0.0.5:5555", "timeout_ms": 250}
