"""Chain parameter registry and resolver for hardhat-network-config library."""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Union

from .constants import CHAIN_PARAMETERS, DEFAULT_KEY, DEVELOPMENT_CHAINS
from .exceptions import (
    ConfigFileNotFoundError,
    DuplicateChainError,
    InvalidChainIdError,
    InvalidDefaultError,
    MissingDefaultError,
    MissingFieldError,
    UnknownDevelopmentChainError,
    UnknownFieldError,
)
from .types import ChainParameters

logger = logging.getLogger(__name__)

ChainKey = Union[int, str]


def normalize_chain_key(chain_id: ChainKey) -> ChainKey:
    """
    Convert a chain identifier to its registry key.

    Args:
        chain_id: Integer id, numeric string (e.g., "137") or "default"

    Returns:
        Integer chain id, or DEFAULT_KEY

    Raises:
        InvalidChainIdError: If the id is negative or not numeric
    """
    if chain_id == DEFAULT_KEY:
        return DEFAULT_KEY

    if isinstance(chain_id, bool):
        raise InvalidChainIdError(f"Invalid chain id: {chain_id!r}")

    if isinstance(chain_id, str):
        if not chain_id.strip().isdecimal():
            raise InvalidChainIdError(f"Invalid chain id: {chain_id!r}")
        return int(chain_id)

    if not isinstance(chain_id, int) or chain_id < 0:
        raise InvalidChainIdError(f"Invalid chain id: {chain_id!r}")

    return chain_id


class ChainRegistry:
    """Read-only mapping from chain id (plus the default key) to chain parameters."""

    def __init__(self, entries: Mapping[ChainKey, ChainParameters]):
        """
        Initialize the registry.

        Args:
            entries: Mapping keyed by chain id or DEFAULT_KEY

        Raises:
            MissingDefaultError: If no default entry is present
            InvalidDefaultError: If the default entry has oracle fields or a chain id
            DuplicateChainError: If a key disagrees with its bundle's chain id
                                 or an id is registered twice
            InvalidChainIdError: If a key is not a valid chain id
        """
        table: Dict[ChainKey, ChainParameters] = {}
        for key, params in entries.items():
            key = normalize_chain_key(key)
            if key in table:
                raise DuplicateChainError(f"Chain id {key} registered more than once")
            if key != DEFAULT_KEY and params.chain_id != key:
                raise DuplicateChainError(
                    f"Chain parameters for '{params.name}' declare chain id "
                    f"{params.chain_id} but are registered under {key}"
                )
            table[key] = params

        if DEFAULT_KEY not in table:
            raise MissingDefaultError("Chain registry has no default entry")

        if table[DEFAULT_KEY].chain_id is not None:
            raise InvalidDefaultError(
                f"Default chain parameters must not declare a chain id, got {table[DEFAULT_KEY].chain_id}"
            )

        populated = table[DEFAULT_KEY].present_oracle_fields()
        if populated:
            raise InvalidDefaultError(
                f"Default chain parameters must not set oracle fields: {', '.join(populated)}"
            )

        self._entries = MappingProxyType(table)

    @classmethod
    def from_mapping(cls, raw: Mapping[ChainKey, Mapping[str, Any]]) -> "ChainRegistry":
        """
        Build a registry from the raw table format.

        Args:
            raw: Mapping of chain id (or "default") to raw parameter dicts

        Returns:
            ChainRegistry instance
        """
        entries: Dict[ChainKey, ChainParameters] = {}
        for key, raw_params in raw.items():
            key = normalize_chain_key(key)
            if key in entries:
                raise DuplicateChainError(f"Chain id {key} registered more than once")
            chain_id = None if key == DEFAULT_KEY else key
            entries[key] = ChainParameters.from_dict(raw_params, chain_id=chain_id)
        return cls(entries)

    @classmethod
    def from_json(cls, path: Union[Path, str]) -> "ChainRegistry":
        """
        Load a registry from a JSON file in the raw table format.

        Args:
            path: Path to the JSON file

        Returns:
            ChainRegistry instance

        Raises:
            ConfigFileNotFoundError: If the file does not exist
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigFileNotFoundError(f"Chain parameter file not found at {config_path}")

        with open(config_path) as f:
            raw = json.load(f)

        return cls.from_mapping(raw)

    @property
    def default(self) -> ChainParameters:
        return self._entries[DEFAULT_KEY]

    def get(self, chain_id: ChainKey) -> Optional[ChainParameters]:
        """Return the exact entry for a chain id, or None."""
        return self._entries.get(normalize_chain_key(chain_id))

    def chain_ids(self) -> List[int]:
        """Return sorted ids of all non-default entries."""
        return sorted(k for k in self._entries if k != DEFAULT_KEY)

    def names(self) -> FrozenSet[str]:
        return frozenset(p.name for p in self._entries.values())

    def __contains__(self, chain_id: object) -> bool:
        try:
            return normalize_chain_key(chain_id) in self._entries  # type: ignore[arg-type]
        except InvalidChainIdError:
            return False

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)


class ChainParameterResolver:
    """Resolves chain parameters by chain id, with fallback to the default bundle."""

    def __init__(self, registry: ChainRegistry, development_chains: Iterable[str]):
        """
        Initialize the resolver.

        Args:
            registry: Chain parameter registry
            development_chains: Names of local/ephemeral chains

        Raises:
            UnknownDevelopmentChainError: If a development chain name matches
                                          no registry entry
        """
        dev_chains = frozenset(development_chains)
        unknown = sorted(dev_chains - registry.names())
        if unknown:
            raise UnknownDevelopmentChainError(
                f"Development chains not found in registry: {', '.join(unknown)}"
            )

        self._registry = registry
        self._development_chains = dev_chains

    @property
    def registry(self) -> ChainRegistry:
        return self._registry

    @property
    def development_chains(self) -> FrozenSet[str]:
        return self._development_chains

    def resolve(self, chain_id: ChainKey) -> ChainParameters:
        """
        Get chain parameters for a chain id.

        Unregistered ids are not an error: they resolve to the default bundle.

        Args:
            chain_id: Integer id, numeric string or "default"

        Returns:
            ChainParameters registered for the id, else the default bundle

        Raises:
            InvalidChainIdError: If the id is negative or not numeric
        """
        params = self._registry.get(chain_id)
        if params is None:
            logger.debug("No parameters registered for chain %s, using default", chain_id)
            return self._registry.default
        return params

    def is_development_chain(self, name: str) -> bool:
        """
        Check if a chain name is a local/development chain.

        Args:
            name: Chain name (e.g., "hardhat", "polygon")

        Returns:
            True if the name is in the development set, False otherwise
        """
        return name in self._development_chains

    def registered_chain_ids(self) -> List[int]:
        return self._registry.chain_ids()


def require_field(params: ChainParameters, field_name: str) -> Any:
    """
    Get a field that the caller cannot proceed without.

    Callers on development chains are expected to branch to a mock before
    reaching for oracle fields; this is the loud failure for everyone else.

    Args:
        params: Resolved chain parameters
        field_name: ChainParameters field name (e.g., "subscription_id")

    Returns:
        The field value

    Raises:
        UnknownFieldError: If the field is not part of ChainParameters
        MissingFieldError: If the field is absent for the resolved chain
    """
    if field_name not in ChainParameters.field_names():
        raise UnknownFieldError(f"Unknown chain parameter field '{field_name}'")

    value = getattr(params, field_name)
    if value is None:
        raise MissingFieldError(
            f"Field '{field_name}' is not configured for chain '{params.name}'"
        )
    return value


def build_default_resolver() -> ChainParameterResolver:
    """Build a resolver from the built-in chain parameter table."""
    registry = ChainRegistry.from_mapping(CHAIN_PARAMETERS)
    return ChainParameterResolver(registry, DEVELOPMENT_CHAINS)
