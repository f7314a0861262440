"""Shared pytest fixtures for hardhat-network-config tests."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from hardhat_network_config.environment import EnvironmentSettings, load_environment
from hardhat_network_config.registry import ChainParameterResolver, build_default_resolver


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_chain_table(fixtures_dir: Path) -> Dict[str, Any]:
    """Load and return the sample chain_parameters.json fixture."""
    with open(fixtures_dir / "chain_parameters.json") as f:
        return json.load(f)


@pytest.fixture
def temp_chain_parameters_file(tmp_path: Path, sample_chain_table: Dict[str, Any]) -> Path:
    """Create a temporary chain_parameters.json file with sample data."""
    params_path = tmp_path / "chain_parameters.json"
    with open(params_path, "w") as f:
        json.dump(sample_chain_table, f, indent=2)
    return params_path


@pytest.fixture
def resolver() -> ChainParameterResolver:
    """Resolver built from the built-in chain parameter table."""
    return build_default_resolver()


@pytest.fixture
def full_environ() -> Dict[str, str]:
    """Environment with every supported variable set."""
    return {
        "PRIVATE_KEY": "0xabc123",
        "MNEMONIC": "test test test test test test test test test test test junk",
        "MAINNET_RPC_URL": "https://mainnet.example/rpc",
        "GOERLI_RPC_URL": "https://goerli.example/rpc",
        "POLYGON_MAINNET_RPC_URL": "https://polygon.example/rpc",
        "POLYGON_MUMBAI_RPC_URL": "https://mumbai.example/rpc",
        "REPORT_GAS": "true",
        "COINMARKETCAP_API_KEY": "cmc-key",
    }


@pytest.fixture
def full_env(full_environ: Dict[str, str]) -> EnvironmentSettings:
    """EnvironmentSettings loaded from full_environ."""
    return load_environment(environ=full_environ)


@pytest.fixture
def empty_env() -> EnvironmentSettings:
    """EnvironmentSettings loaded from an empty environment."""
    return load_environment(environ={})
