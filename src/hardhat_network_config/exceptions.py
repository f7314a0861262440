"""Custom exception classes for hardhat-network-config library."""


class NetworkConfigError(Exception):
    """Base exception for network configuration errors."""

    pass


class MissingDefaultError(NetworkConfigError, ValueError):
    """Raised when a chain registry has no default entry."""

    pass


class InvalidDefaultError(NetworkConfigError, ValueError):
    """Raised when the default entry carries oracle-dependent fields."""

    pass


class DuplicateChainError(NetworkConfigError, ValueError):
    """Raised when a chain id is registered more than once or under the wrong key."""

    pass


class InvalidChainIdError(NetworkConfigError, ValueError):
    """Raised when a chain id is negative or not an integer."""

    pass


class UnknownDevelopmentChainError(NetworkConfigError, ValueError):
    """Raised when a development chain name matches no registry entry."""

    pass


class MissingFieldError(NetworkConfigError, LookupError):
    """Raised when a required field is absent from the resolved chain parameters."""

    pass


class UnknownFieldError(NetworkConfigError, ValueError):
    """Raised when a field name is not part of ChainParameters."""

    pass


class InvalidAddressError(NetworkConfigError, ValueError):
    """Raised when an oracle coordinator address is not a valid address."""

    pass


class NetworkNotFoundError(NetworkConfigError, ValueError):
    """Raised when requested network is not configured."""

    pass


class NamedAccountNotFoundError(NetworkConfigError, LookupError):
    """Raised when requested named account is not configured."""

    pass


class ConfigFileNotFoundError(NetworkConfigError, FileNotFoundError):
    """Raised when a chain parameter file is not found."""

    pass


class MissingParameterError(NetworkConfigError, ValueError):
    """Raised when a raw chain parameter entry is missing a required key."""

    pass


class InvalidNamedAccountError(NetworkConfigError, ValueError):
    """Raised when a named account has no default signer index."""

    pass
