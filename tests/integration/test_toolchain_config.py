"""Integration tests for ToolchainConfig built from the environment."""

import pytest

from hardhat_network_config import (
    NetworkNotFoundError,
    PrivateKeyAccounts,
    VERIFICATION_BLOCK_CONFIRMATIONS,
    build_toolchain_config,
)
from hardhat_network_config.constants import PLACEHOLDER_PRIVATE_KEY


@pytest.fixture
def config(full_env):
    return build_toolchain_config(full_env)


class TestNetworks:
    """Test the built-in network definitions."""

    def test_all_networks_present(self, config):
        assert set(config.networks) == {
            "localhost",
            "hardhat",
            "goerli",
            "mainnet",
            "polygon",
            "mumbai",
        }

    def test_default_network_is_mumbai(self, config):
        assert config.default_network == "mumbai"
        assert config.network().chain_id == 80001

    def test_remote_network_settings(self, config):
        polygon = config.network("polygon")

        assert polygon.url == "https://polygon.example/rpc"
        assert polygon.chain_id == 137
        assert polygon.accounts == PrivateKeyAccounts(("0xabc123",))
        assert polygon.save_deployments is True

    def test_local_network_settings(self, config):
        localhost = config.network("localhost")

        assert localhost.url == "http://127.0.0.1:8545"
        assert localhost.chain_id is None
        assert localhost.accounts is None
        assert localhost.save_deployments is False

    def test_unknown_network_raises(self, config):
        with pytest.raises(NetworkNotFoundError):
            config.network("ropsten")

    def test_network_for_chain_id(self, config):
        assert config.network_for_chain_id(5).name == "goerli"
        assert config.network_for_chain_id("1").name == "mainnet"
        assert config.network_for_chain_id(42) is None

    def test_placeholder_environment(self, empty_env):
        """Test that networks still build when nothing is configured."""
        config = build_toolchain_config(empty_env)
        goerli = config.network("goerli")

        assert goerli.url == "https://eth-goerli.g.alchemy.com/v2/your-api-key"
        assert goerli.accounts == PrivateKeyAccounts((PLACEHOLDER_PRIVATE_KEY,))


class TestCompilerAndReporting:
    """Test solidity, gas reporter and contract sizer settings."""

    def test_solidity(self, config):
        assert config.solidity.version == "0.8.7"
        assert config.solidity.optimizer_enabled is True
        assert config.solidity.optimizer_runs == 1000

    def test_gas_reporter_follows_environment(self, config, empty_env):
        assert config.gas_reporter.enabled is True
        assert config.gas_reporter.coinmarketcap_api_key == "cmc-key"
        assert config.gas_reporter.currency == "USD"
        assert config.gas_reporter.output_file == "gas-report.txt"
        assert config.gas_reporter.no_colors is True

        assert build_toolchain_config(empty_env).gas_reporter.enabled is False

    def test_contract_sizer(self, config):
        assert config.contract_sizer.run_on_compile is False
        assert config.contract_sizer.only == ("Lottery",)

    def test_test_timeout(self, config):
        assert config.test_timeout_ms == 500000

    def test_overrides(self, full_env):
        config = build_toolchain_config(full_env, default_network="goerli")
        assert config.network().name == "goerli"

    def test_named_accounts(self, config):
        assert config.named_accounts.account_index("deployer", 1) == 0
        assert config.named_accounts.account_index("player") == 1


class TestChainParametersForNetwork:
    """Test resolving chain parameters through configured networks."""

    def test_polygon(self, config, resolver):
        params = config.chain_parameters(resolver, "polygon")

        assert params.name == "polygon"
        assert config.is_development_network(resolver, "polygon") is False

    def test_default_network(self, config, resolver):
        assert config.chain_parameters(resolver).name == "mumbai"

    def test_localhost_uses_hardhat_chain_id(self, config, resolver):
        """Test that localhost resolves through its implicit chain id."""
        params = config.chain_parameters(resolver, "localhost")

        assert params.chain_id == 31337
        assert params.name == "localhost"
        assert config.is_development_network(resolver, "localhost") is True

    def test_hardhat_network(self, config, resolver):
        """Test that the in-process network resolves the localhost bundle."""
        assert config.chain_parameters(resolver, "hardhat").chain_id == 31337
        assert config.is_development_network(resolver, "hardhat") is True

    def test_mainnet_falls_back_to_default(self, config, resolver):
        params = config.chain_parameters(resolver, "mainnet")
        assert params == resolver.resolve("default")


class TestDeploymentFlow:
    """Test the branch a deploy script takes on each network."""

    def _plan(self, config, resolver, network_name):
        params = config.chain_parameters(resolver, network_name)
        if config.is_development_network(resolver, network_name):
            return {"coordinator": "mock", "confirmations": 1}
        return {
            "coordinator": params.oracle_coordinator_address,
            "confirmations": VERIFICATION_BLOCK_CONFIRMATIONS,
        }

    def test_development_network_uses_mock(self, config, resolver):
        assert self._plan(config, resolver, "hardhat") == {"coordinator": "mock", "confirmations": 1}

    def test_remote_network_uses_coordinator(self, config, resolver):
        plan = self._plan(config, resolver, "goerli")

        assert plan["coordinator"] == "0x2Ca8E0C643bDe4C2E08ab1fA0da3401AdAD7734D"
        assert plan["confirmations"] == 6
