"""Data types and dataclasses for hardhat-network-config library."""

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from eth_utils import is_address, to_checksum_address, to_wei

from .exceptions import InvalidAddressError, MissingParameterError

# Fields only populated for chains that reach an external VRF/price oracle
ORACLE_FIELDS = (
    "gas_lane",
    "entrance_fee",
    "callback_gas_limit",
    "subscription_id",
    "oracle_coordinator_address",
)

# Raw table key -> ChainParameters field
RAW_FIELD_NAMES = {
    "name": "name",
    "keepersUpdateInterval": "update_interval_seconds",
    "gasLane": "gas_lane",
    "lotteryEntranceFee": "entrance_fee",
    "callbackGasLimit": "callback_gas_limit",
    "subscriptionId": "subscription_id",
    "vrfCoordinatorV2": "oracle_coordinator_address",
}


@dataclass(frozen=True)
class ChainParameters:
    """Network and runtime parameters registered for one chain."""

    # Required fields
    chain_id: Optional[int]  # None only for the default bundle
    name: str  # e.g., "polygon"
    update_interval_seconds: int  # Keepers upkeep interval

    # Optional fields (oracle-dependent)
    gas_lane: Optional[str] = None  # VRF key hash
    entrance_fee: Optional[int] = None  # Wei
    callback_gas_limit: Optional[int] = None
    subscription_id: Optional[int] = None
    oracle_coordinator_address: Optional[str] = None  # Checksummed address

    @property
    def has_oracle_config(self) -> bool:
        """
        Whether the bundle carries everything needed to request randomness.

        The coordinator address is not required: development chains deploy
        a mock coordinator whose address is only known after deployment.
        """
        return all(
            getattr(self, field_name) is not None
            for field_name in ORACLE_FIELDS
            if field_name != "oracle_coordinator_address"
        )

    def present_oracle_fields(self) -> Tuple[str, ...]:
        """Return names of the oracle fields populated on this bundle."""
        return tuple(f for f in ORACLE_FIELDS if getattr(self, f) is not None)

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(
        cls, raw: Mapping[str, Any], chain_id: Optional[int] = None
    ) -> "ChainParameters":
        """
        Build chain parameters from the raw table format.

        Args:
            raw: Mapping with camelCase keys (keepersUpdateInterval, gasLane,
                 lotteryEntranceFee, callbackGasLimit, subscriptionId,
                 vrfCoordinatorV2). Snake_case field names are accepted too.
            chain_id: Chain id the bundle is registered under
                      (None for the default bundle)

        Returns:
            ChainParameters instance

        Raises:
            MissingParameterError: If name or keepersUpdateInterval is absent
            InvalidAddressError: If the coordinator is not a valid address
            ValueError: If a numeric field cannot be parsed
        """
        values: Dict[str, Any] = {}
        for key, value in raw.items():
            values[RAW_FIELD_NAMES.get(key, key)] = value

        for required in ("name", "update_interval_seconds"):
            if required not in values:
                raise MissingParameterError(
                    f"Missing required parameter '{required}' for chain "
                    f"{chain_id if chain_id is not None else 'default'}"
                )

        return cls(
            chain_id=chain_id,
            name=values["name"],
            update_interval_seconds=int(values["update_interval_seconds"]),
            gas_lane=values.get("gas_lane"),
            entrance_fee=_parse_entrance_fee(values.get("entrance_fee")),
            callback_gas_limit=_optional_int(values.get("callback_gas_limit")),
            subscription_id=_optional_int(values.get("subscription_id")),
            oracle_coordinator_address=_parse_address(
                values.get("oracle_coordinator_address")
            ),
        )


def _optional_int(value: Optional[Union[int, str]]) -> Optional[int]:
    if value is None:
        return None
    return int(value)


def _parse_entrance_fee(value: Optional[Union[int, str, Decimal]]) -> Optional[int]:
    """Integers are taken as wei, strings and decimals as ether."""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    return int(to_wei(Decimal(str(value)), "ether"))


def _parse_address(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not is_address(value):
        raise InvalidAddressError(f"Invalid oracle coordinator address: {value}")
    return to_checksum_address(value)
