"""
Configuration settings for Seam RPC servers and clients
"""
import os
from dataclasses import dataclass
from typing import Any, Dict


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ServerConfig:
    """Configuration for an RPC server adapter"""
    bind_address: str = "tcp://*:5555"
    reply_timeout_ms: int = 30000
    service_name: str = "seam_rpc.server"

    # Tracing configuration
    enable_tracing: bool = False
    otlp_endpoint: str = "localhost:4317"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Create config from environment variables"""
        return cls(
            bind_address=os.getenv("SEAM_RPC_BIND_ADDRESS", "tcp://*:5555"),
            reply_timeout_ms=int(os.getenv("SEAM_RPC_REPLY_TIMEOUT_MS", "30000")),
            service_name=os.getenv("SEAM_RPC_SERVICE_NAME", "seam_rpc.server"),
            enable_tracing=_env_bool("SEAM_RPC_ENABLE_TRACING", False),
            otlp_endpoint=os.getenv("SEAM_RPC_OTLP_ENDPOINT", "localhost:4317"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "bind_address": self.bind_address,
            "reply_timeout_ms": self.reply_timeout_ms,
            "service_name": self.service_name,
            "enable_tracing": self.enable_tracing,
            "otlp_endpoint": self.otlp_endpoint,
        }


@dataclass
class ClientConfig:
    """Configuration for an RPC client adapter"""
    server_address: str = "tcp://localhost:5555"
    timeout_ms: int = 5000

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create config from environment variables"""
        return cls(
            server_address=os.getenv("SEAM_RPC_SERVER_ADDRESS", "tcp://localhost:5555"),
            timeout_ms=int(os.getenv("SEAM_RPC_TIMEOUT_MS", "5000")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "server_address": self.server_address,
            "timeout_ms": self.timeout_ms,
        }
