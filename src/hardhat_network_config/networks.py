"""Network and toolchain configuration for hardhat-network-config library."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .constants import (
    DEFAULT_KEY,
    DEFAULT_NETWORK,
    HARDHAT_CHAIN_ID,
    NAMED_ACCOUNTS,
    NETWORK_CONFIG,
    TEST_TIMEOUT_MS,
)
from .environment import Accounts, EnvironmentSettings
from .exceptions import (
    InvalidNamedAccountError,
    NamedAccountNotFoundError,
    NetworkNotFoundError,
)
from .registry import ChainKey, ChainParameterResolver, normalize_chain_key
from .types import ChainParameters

# Networks that hardhat serves without a configured chain id
IMPLICIT_CHAIN_IDS = {"localhost": HARDHAT_CHAIN_ID}


@dataclass(frozen=True)
class NetworkSettings:
    """Connection settings for one named network."""

    name: str
    url: Optional[str]  # None for the in-process hardhat network
    chain_id: Optional[int]
    accounts: Optional[Accounts] = None
    save_deployments: bool = False


@dataclass(frozen=True)
class SolidityConfig:
    version: str = "0.8.7"
    optimizer_enabled: bool = True
    optimizer_runs: int = 1000


@dataclass(frozen=True)
class GasReporterConfig:
    enabled: bool = False
    currency: str = "USD"
    output_file: str = "gas-report.txt"
    no_colors: bool = True
    coinmarketcap_api_key: Optional[str] = None


@dataclass(frozen=True)
class ContractSizerConfig:
    run_on_compile: bool = False
    only: Tuple[str, ...] = ("Lottery",)


class NamedAccounts:
    """Maps account names to signer indices, per chain with a default."""

    def __init__(self, accounts: Mapping[str, Mapping[ChainKey, int]]):
        self._accounts: Dict[str, Dict[ChainKey, int]] = {}
        for name, indices in accounts.items():
            table = {normalize_chain_key(k): v for k, v in indices.items()}
            if DEFAULT_KEY not in table:
                raise InvalidNamedAccountError(f"Named account '{name}' has no default index")
            self._accounts[name] = table

    def names(self) -> List[str]:
        return list(self._accounts.keys())

    def account_index(self, name: str, chain_id: Optional[ChainKey] = None) -> int:
        """
        Get the signer index for a named account.

        Args:
            name: Account name (e.g., "deployer")
            chain_id: Chain to resolve for (defaults to the default index)

        Returns:
            Signer index

        Raises:
            NamedAccountNotFoundError: If the account name is not configured
        """
        if name not in self._accounts:
            raise NamedAccountNotFoundError(f"Named account '{name}' not configured")

        indices = self._accounts[name]
        if chain_id is not None:
            key = normalize_chain_key(chain_id)
            if key in indices:
                return indices[key]
        return indices[DEFAULT_KEY]


@dataclass(frozen=True)
class ToolchainConfig:
    """Full network/compiler configuration for the hardhat toolchain."""

    networks: Mapping[str, NetworkSettings]
    default_network: str = DEFAULT_NETWORK
    solidity: SolidityConfig = field(default_factory=SolidityConfig)
    gas_reporter: GasReporterConfig = field(default_factory=GasReporterConfig)
    contract_sizer: ContractSizerConfig = field(default_factory=ContractSizerConfig)
    named_accounts: NamedAccounts = field(default_factory=lambda: NamedAccounts(NAMED_ACCOUNTS))
    test_timeout_ms: int = TEST_TIMEOUT_MS

    def network(self, name: Optional[str] = None) -> NetworkSettings:
        """
        Get settings for a network.

        Args:
            name: Network name (defaults to default_network)

        Returns:
            NetworkSettings

        Raises:
            NetworkNotFoundError: If network is not configured
        """
        if name is None:
            name = self.default_network
        if name not in self.networks:
            raise NetworkNotFoundError(f"Network '{name}' not configured")
        return self.networks[name]

    def network_for_chain_id(self, chain_id: ChainKey) -> Optional[NetworkSettings]:
        """Return the first network configured with the given chain id, or None."""
        chain_id = normalize_chain_key(chain_id)
        for settings in self.networks.values():
            if settings.chain_id == chain_id:
                return settings
        return None

    def chain_parameters(
        self, resolver: ChainParameterResolver, network_name: Optional[str] = None
    ) -> ChainParameters:
        """
        Resolve chain parameters for a configured network.

        Args:
            resolver: Chain parameter resolver
            network_name: Network name (defaults to default_network)

        Returns:
            ChainParameters for the network's chain id, or the default bundle
        """
        settings = self.network(network_name)
        chain_id = settings.chain_id
        if chain_id is None:
            chain_id = IMPLICIT_CHAIN_IDS.get(settings.name)
        if chain_id is None:
            return resolver.resolve(DEFAULT_KEY)
        return resolver.resolve(chain_id)

    def is_development_network(
        self, resolver: ChainParameterResolver, network_name: Optional[str] = None
    ) -> bool:
        return resolver.is_development_chain(self.network(network_name).name)


def build_networks(env: EnvironmentSettings) -> Dict[str, NetworkSettings]:
    """
    Build the built-in network definitions.

    Args:
        env: Environment settings supplying RPC URLs and accounts

    Returns:
        Dictionary mapping network name -> NetworkSettings
    """
    networks: Dict[str, NetworkSettings] = {}
    for name, network_config in NETWORK_CONFIG.items():
        remote = network_config["remote"]
        networks[name] = NetworkSettings(
            name=name,
            url=env.rpc_url(name),
            chain_id=network_config["chain_id"],
            accounts=env.accounts if remote else None,
            save_deployments=remote,
        )
    return networks


def build_toolchain_config(env: EnvironmentSettings, **overrides: Any) -> ToolchainConfig:
    """
    Build the toolchain configuration from environment settings.

    Args:
        env: Environment settings
        **overrides: ToolchainConfig fields to replace (e.g., default_network)

    Returns:
        ToolchainConfig
    """
    gas_reporter = GasReporterConfig(
        enabled=env.report_gas,
        coinmarketcap_api_key=env.coinmarketcap_api_key,
    )
    config: Dict[str, Any] = {
        "networks": MappingProxyType(build_networks(env)),
        "gas_reporter": gas_reporter,
    }
    config.update(overrides)
    return ToolchainConfig(**config)
