"""Community ID flow hashing."""
from .core import CommunityIDError, Config, ConfigError, DigestError, InvalidFlowError, calc, compute
from .encoding import Encoding
from .flow import FlowTuple

__version__ = "1.0.0"

__all__ = [
    "CommunityIDError",
    "Config",
    "ConfigError",
    "DigestError",
    "Encoding",
    "FlowTuple",
    "InvalidFlowError",
    "calc",
    "compute",
]
