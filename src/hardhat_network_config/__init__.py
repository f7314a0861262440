"""
hardhat-network-config: Python library for per-chain hardhat network parameters
"""

from importlib.metadata import PackageNotFoundError, version

from .constants import DEVELOPMENT_CHAINS, VERIFICATION_BLOCK_CONFIRMATIONS
from .environment import (
    EnvironmentSettings,
    MnemonicAccounts,
    PrivateKeyAccounts,
    load_environment,
)
from .exceptions import (
    ConfigFileNotFoundError,
    DuplicateChainError,
    InvalidAddressError,
    InvalidChainIdError,
    InvalidDefaultError,
    InvalidNamedAccountError,
    MissingDefaultError,
    MissingFieldError,
    MissingParameterError,
    NamedAccountNotFoundError,
    NetworkConfigError,
    NetworkNotFoundError,
    UnknownDevelopmentChainError,
    UnknownFieldError,
)
from .networks import NetworkSettings, ToolchainConfig, build_toolchain_config
from .paths import get_frontend_paths
from .registry import (
    ChainParameterResolver,
    ChainRegistry,
    build_default_resolver,
    require_field,
)
from .types import ChainParameters

try:
    __version__ = version("hardhat-network-config")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "ChainParameterResolver",
    "ChainRegistry",
    "ChainParameters",
    "build_default_resolver",
    "require_field",
    "DEVELOPMENT_CHAINS",
    "VERIFICATION_BLOCK_CONFIRMATIONS",
    "EnvironmentSettings",
    "PrivateKeyAccounts",
    "MnemonicAccounts",
    "load_environment",
    "NetworkSettings",
    "ToolchainConfig",
    "build_toolchain_config",
    "get_frontend_paths",
    "NetworkConfigError",
    "MissingDefaultError",
    "InvalidDefaultError",
    "DuplicateChainError",
    "InvalidChainIdError",
    "UnknownDevelopmentChainError",
    "MissingFieldError",
    "MissingParameterError",
    "UnknownFieldError",
    "InvalidAddressError",
    "NetworkNotFoundError",
    "NamedAccountNotFoundError",
    "InvalidNamedAccountError",
    "ConfigFileNotFoundError",
]
