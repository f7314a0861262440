"""Environment variable loading for hardhat-network-config library."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Mapping, Optional, Tuple, Union

from dotenv import find_dotenv, load_dotenv

from .constants import NETWORK_CONFIG, PLACEHOLDER_PRIVATE_KEY

logger = logging.getLogger(__name__)

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class PrivateKeyAccounts:
    """Accounts given as a list of private keys."""

    private_keys: Tuple[str, ...]


@dataclass(frozen=True)
class MnemonicAccounts:
    """Accounts derived from an HD wallet mnemonic."""

    mnemonic: str


Accounts = Union[PrivateKeyAccounts, MnemonicAccounts]


@dataclass(frozen=True)
class EnvironmentSettings:
    """Secrets and endpoints injected through the process environment."""

    accounts: Accounts
    rpc_urls: Dict[str, str]  # Network name -> RPC URL
    report_gas: bool = False
    coinmarketcap_api_key: Optional[str] = None
    # Variables that were unset and replaced by a placeholder
    placeholders: FrozenSet[str] = field(default_factory=frozenset)

    def rpc_url(self, network: str) -> Optional[str]:
        return self.rpc_urls.get(network)


def parse_bool(value: Optional[str]) -> bool:
    """
    Parse an environment flag.

    Args:
        value: Raw variable value (None if unset)

    Returns:
        True for "1", "true", "yes" or "on" (case-insensitive), False otherwise
    """
    if value is None:
        return False
    return value.strip().lower() in TRUTHY_VALUES


def resolve_accounts(
    private_key: Optional[str], mnemonic: Optional[str]
) -> Tuple[Accounts, bool]:
    """
    Pick the account source: private key, then mnemonic, then placeholder.

    Args:
        private_key: $PRIVATE_KEY value
        mnemonic: $MNEMONIC value

    Returns:
        Tuple of (accounts, used_placeholder)
    """
    if private_key:
        return PrivateKeyAccounts((private_key,)), False
    if mnemonic:
        return MnemonicAccounts(mnemonic), False
    return PrivateKeyAccounts((PLACEHOLDER_PRIVATE_KEY,)), True


def load_environment(
    dotenv_path: Optional[Union[Path, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> EnvironmentSettings:
    """
    Read secrets and endpoints from the environment.

    Unset values fall back to placeholder literals; calls made with them
    fail at the RPC provider, not here.

    Args:
        dotenv_path: .env file to load first (defaults to python-dotenv's
                     search from the current directory). Existing variables
                     are not overridden. Skipped when environ is given.
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        EnvironmentSettings
    """
    if environ is None:
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        environ = os.environ

    placeholders = set()

    accounts, used_placeholder = resolve_accounts(
        environ.get("PRIVATE_KEY"), environ.get("MNEMONIC")
    )
    if used_placeholder:
        placeholders.add("PRIVATE_KEY")
        logger.warning("Neither PRIVATE_KEY nor MNEMONIC set, using placeholder account")

    rpc_urls: Dict[str, str] = {}
    for network, network_config in NETWORK_CONFIG.items():
        env_var = network_config.get("rpc_env")
        if env_var is None:
            if network_config["url"] is not None:
                rpc_urls[network] = network_config["url"]
            continue

        url = environ.get(env_var)
        if not url:
            placeholders.add(env_var)
            logger.warning("%s not set, using placeholder RPC URL for %s", env_var, network)
            url = network_config["url"]
        rpc_urls[network] = url

    return EnvironmentSettings(
        accounts=accounts,
        rpc_urls=rpc_urls,
        report_gas=parse_bool(environ.get("REPORT_GAS")),
        coinmarketcap_api_key=environ.get("COINMARKETCAP_API_KEY"),
        placeholders=frozenset(placeholders),
    )
