# Network endpoints (public Sui fullnodes)
# Per-process overrides go through create_sdk_options / with_full_rpc_url.

# --- FULLNODE / GRAPHQL ---
FULL_RPC_URL_MAINNET = "https://fullnode.mainnet.sui.io:443"
FULL_RPC_URL_TESTNET = "https://fullnode.testnet.sui.io:443"
GRAPH_RPC_URL_MAINNET = "https://sui-mainnet.mystenlabs.com/graphql"
GRAPH_RPC_URL_TESTNET = "https://sui-testnet.mystenlabs.com/graphql"

# --- AGGREGATOR ---
AGGREGATOR_URL_MAINNET = "https://api-sui.cetus.zone/router_v3"
AGGREGATOR_URL_TESTNET = "https://api-sui.devcetus.com/router_v3"

# --- STATS ---
STATS_POOLS_URL_TESTNET = "https://api-sui.devcetus.com/v2/sui/stats_pools"

# --- PROVIDERS ---
# Liquidity sources understood by the router
PROVIDERS = (
    "CETUS",
    "DEEPBOOK",
    "DEEPBOOKV3",
    "KRIYA",
    "KRIYAV3",
    "FLOWX",
    "FLOWXV3",
    "AFTERMATH",
    "TURBOS",
    "HAEDAL",
    "VOLO",
    "AFSUI",
    "BLUEMOVE",
    "SCALLOP",
    "SPRINGSUI",
    "BLUEFIN",
)

DEFAULT_PROVIDERS = (
    "CETUS",
    "DEEPBOOKV3",
    "KRIYA",
    "KRIYAV3",
    "FLOWX",
    "FLOWXV3",
    "AFTERMATH",
    "TURBOS",
    "HAEDAL",
    "VOLO",
    "AFSUI",
    "BLUEMOVE",
    "SCALLOP",
    "SPRINGSUI",
    "BLUEFIN",
)

# Sui object ids and package ids are 32 bytes
SUI_ADDRESS_LENGTH = 32
