"""Front-end artifact path helpers for hardhat-network-config library."""

from pathlib import Path
from typing import Optional, Union

# Relative to the contracts repo root; read by the front-end build
FRONTEND_CONTRACTS_FILE = "../nextjs-smartcontract-lottery-fcc/constants/contractAddresses.json"
FRONTEND_ABI_FILE = "../nextjs-smartcontract-lottery-fcc/constants/abi.json"


def get_default_frontend_dir() -> Path:
    """
    Get default front-end constants directory (sibling of the working directory).

    Returns:
        Path to ../nextjs-smartcontract-lottery-fcc/constants
    """
    return (Path.cwd() / FRONTEND_CONTRACTS_FILE).resolve().parent


def get_frontend_paths(
    frontend_root: Optional[Union[Path, str]] = None,
) -> tuple[Path, Path]:
    """
    Get front-end artifact file paths.

    Args:
        frontend_root: Custom constants directory
                       (defaults to ../nextjs-smartcontract-lottery-fcc/constants)

    Returns:
        Tuple of (contract_addresses_path, abi_path)
    """
    if frontend_root is None:
        frontend_root = get_default_frontend_dir()
    else:
        frontend_root = Path(frontend_root).resolve()

    contracts_path = frontend_root / Path(FRONTEND_CONTRACTS_FILE).name
    abi_path = frontend_root / Path(FRONTEND_ABI_FILE).name

    return (contracts_path, abi_path)
