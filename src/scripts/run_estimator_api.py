"""
Serve the swap estimator API.

Composition root: reads configuration, creates the Web3 client and the
pair reader, and hands them to the API. Nothing below this module creates
its own node connection.

Usage:
    ETH_NODE_URL=http://localhost:8545 python src/scripts/run_estimator_api.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import uvicorn
from web3 import Web3

from src.api import create_app
from src.config import ConfigError, ConfigManager, get_config
from src.estimator import SwapEstimator
from src.ledger import UniswapV2PairReader

logger = logging.getLogger(__name__)


def build_estimator(config: ConfigManager) -> SwapEstimator:
    """Wire a SwapEstimator from configuration."""
    chains = config.chains
    web3 = Web3(Web3.HTTPProvider(chains.rpc_url, request_kwargs={"timeout": chains.RPC_TIMEOUT_SECONDS}))

    reader = UniswapV2PairReader(web3, **chains.get_reader_kwargs())
    return SwapEstimator(reader, strict_pair_check=chains.STRICT_PAIR_CHECK)


def check_chain(web3: Web3, expected_chain_id: int) -> None:
    """Warn when the node is on a different chain than configured."""
    try:
        chain_id = web3.eth.chain_id
    except Exception as e:
        logger.warning(f"Could not reach node to verify chain id: {e}")
        return

    if chain_id != expected_chain_id:
        logger.warning(f"Node reports chain {chain_id}, configured CHAIN_ID is {expected_chain_id}")
    else:
        logger.info(f"Connected to chain ID: {chain_id}")


def main() -> int:
    try:
        config = get_config()
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    estimator = build_estimator(config)
    check_chain(estimator.pair_reader.web3, config.chains.CHAIN_ID)

    app = create_app(estimator)

    logger.info(f"Starting server on {config.server.HOST}:{config.server.PORT}")
    uvicorn.run(app, host=config.server.HOST, port=config.server.PORT)
    return 0


if __name__ == "__main__":
    sys.exit(main())
