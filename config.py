import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# JSON-RPC endpoint of the chain hosting the AMM contracts
RPC_URL = os.getenv('RPC_URL', 'http://127.0.0.1:8545')

# Optional signing key; without it the node's first unlocked account signs
PRIVATE_KEY = os.getenv('PRIVATE_KEY') or None

# Connection settings
CONNECTION_TIMEOUT = int(os.getenv('CONNECTION_TIMEOUT', '30'))
TX_TIMEOUT = int(os.getenv('TX_TIMEOUT', '120'))  # seconds to wait for a receipt

# Compiled contract artifacts (Hardhat/Remix/Foundry JSON with abi + bytecode)
ARTIFACTS_DIR = os.getenv('ARTIFACTS_DIR', 'artifacts')
TOKEN_CONTRACT_NAME = os.getenv('TOKEN_CONTRACT_NAME', 'TestERC20')
FACTORY_CONTRACT_NAME = os.getenv('FACTORY_CONTRACT_NAME', 'UniswapV3Factory')

# Deployment parameters for the full flow
FEE_TIER = int(os.getenv('FEE_TIER', '3000'))  # 0.3%
TOKEN_DECIMALS = int(os.getenv('TOKEN_DECIMALS', '18'))
INITIAL_SUPPLY = os.getenv('INITIAL_SUPPLY', '1000000')  # whole tokens
LIQUIDITY_AMOUNT = os.getenv('LIQUIDITY_AMOUNT', '1000')  # whole tokens per side
SWAP_AMOUNT = os.getenv('SWAP_AMOUNT', '100')  # whole tokens

LOG_TO_FILE = os.getenv('LOG_TO_FILE', 'true').lower() == 'true'

# Deployed contract addresses - fill these in before using the manual helpers.
# initialize_web3_addresses() converts them to checksum format once connected.
FACTORY_ADDRESS = os.getenv('FACTORY_ADDRESS') or None
TOKEN_A_ADDRESS = os.getenv('TOKEN_A_ADDRESS') or None
TOKEN_B_ADDRESS = os.getenv('TOKEN_B_ADDRESS') or None
POOL_ADDRESS = os.getenv('POOL_ADDRESS') or None

ADDRESS_SETTINGS = ('FACTORY_ADDRESS', 'TOKEN_A_ADDRESS', 'TOKEN_B_ADDRESS', 'POOL_ADDRESS')


def require_address(name):
    """Return a configured address placeholder or fail naming the variable"""
    value = globals().get(name)
    if not value:
        raise ValueError(f"{name} environment variable is required for this operation")
    return value
