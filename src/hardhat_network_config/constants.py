"""Configuration constants for hardhat-network-config library."""

# Sentinel registry key for the fallback bundle
DEFAULT_KEY = "default"

# Per-chain parameters in the raw table format used by the deploy scripts
# Entrance fees are in ether and converted to wei on load
CHAIN_PARAMETERS = {
    DEFAULT_KEY: {
        "name": "hardhat",
        "keepersUpdateInterval": "30",
    },
    31337: {
        "name": "localhost",
        "subscriptionId": "588",
        "gasLane": "0xd89b2bf150e3b9e13446986e571fb9cab24b13cea0a43ea20a6049a85cc807cc",  # 30 gwei
        "keepersUpdateInterval": "30",
        "lotteryEntranceFee": "0.01",
        "callbackGasLimit": "500000",
    },
    5: {
        "name": "goerli",
        "subscriptionId": "7354",
        "gasLane": "0x79d3d8832d904592c0bf9818b621522c988bb8b0c05cdc3b15aea1b6e8db0c15",  # 30 gwei
        "keepersUpdateInterval": "30",
        "lotteryEntranceFee": "0.01",
        "callbackGasLimit": "500000",
        "vrfCoordinatorV2": "0x2Ca8E0C643bDe4C2E08ab1fA0da3401AdAD7734D",
    },
    80001: {
        "name": "mumbai",
        "subscriptionId": "2805",
        "gasLane": "0x4b09e658ed251bcafeebbc69400383d49f344ace09b9576fe248bb02c003fe9f",  # 500 gwei
        "keepersUpdateInterval": "30",
        "lotteryEntranceFee": "0.00073",  # Approx. 1 MATIC
        "callbackGasLimit": "500000",
        "vrfCoordinatorV2": "0x7a1BaC17Ccc5b313516C5E16fb24f7659aA5ebed",
    },
    137: {
        "name": "polygon",
        "subscriptionId": "6926",
        "gasLane": "0x6e099d640cde6de9d40ac749b4b594126b0169747122711109c9985d47751f93",  # 200 gwei
        "keepersUpdateInterval": "30",
        "lotteryEntranceFee": "0.00073",  # Approx. 1 MATIC
        "callbackGasLimit": "500000",
        "vrfCoordinatorV2": "0xAE975071Be8F8eE67addBC1A82488F1C24858067",
    },
}

# Chains with no access to external oracle networks
DEVELOPMENT_CHAINS = frozenset({"hardhat", "localhost"})

VERIFICATION_BLOCK_CONFIRMATIONS = 6

# Chain id hardhat assigns to its in-process and localhost node
HARDHAT_CHAIN_ID = 31337

# Environment variable placeholders, used when the variable is unset
PLACEHOLDER_PRIVATE_KEY = "your private key"
PLACEHOLDER_MNEMONIC = "your mnemonic"

# Network definitions: RPC env var, placeholder URL and chain id
NETWORK_CONFIG = {
    "localhost": {
        "url": "http://127.0.0.1:8545",
        "chain_id": None,
        "remote": False,
    },
    "hardhat": {
        "url": None,
        "chain_id": HARDHAT_CHAIN_ID,
        "remote": False,
    },
    "goerli": {
        "rpc_env": "GOERLI_RPC_URL",
        "url": "https://eth-goerli.g.alchemy.com/v2/your-api-key",
        "chain_id": 5,
        "remote": True,
    },
    "mainnet": {
        "rpc_env": "MAINNET_RPC_URL",
        "url": "https://eth-mainnet.alchemyapi.io/v2/your-api-key",
        "chain_id": 1,
        "remote": True,
    },
    "polygon": {
        "rpc_env": "POLYGON_MAINNET_RPC_URL",
        "url": "https://polygon-mainnet.alchemyapi.io/v2/your-api-key",
        "chain_id": 137,
        "remote": True,
    },
    "mumbai": {
        "rpc_env": "POLYGON_MUMBAI_RPC_URL",
        "url": "https://polygon-mumbai.g.alchemy.com/v2/your-api-key",
        "chain_id": 80001,
        "remote": True,
    },
}

DEFAULT_NETWORK = "mumbai"

# Named account indices: default index plus per-chain overrides
NAMED_ACCOUNTS = {
    "deployer": {DEFAULT_KEY: 0, 1: 0},
    "player": {DEFAULT_KEY: 1},
}

TEST_TIMEOUT_MS = 500000  # 500 seconds max for running tests
