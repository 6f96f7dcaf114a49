"""Tests for wiring the estimator from configuration."""

import logging
from unittest.mock import MagicMock, PropertyMock, patch

import pytest

from src.config import ConfigManager
from src.estimator import SwapEstimator
from src.ledger import UniswapV2PairReader
from src.scripts.run_estimator_api import build_estimator, check_chain


@pytest.fixture
def config(monkeypatch):
    monkeypatch.setenv("ETH_NODE_URL", "http://localhost:8545")
    monkeypatch.setenv("RPC_TIMEOUT_SECONDS", "3")
    monkeypatch.setenv("STRICT_PAIR_CHECK", "false")
    monkeypatch.setenv("BLOCK_IDENTIFIER", "latest")
    return ConfigManager()


def test_build_estimator(config):
    estimator = build_estimator(config)

    assert isinstance(estimator, SwapEstimator)
    assert isinstance(estimator.pair_reader, UniswapV2PairReader)
    assert estimator.strict_pair_check is False
    assert estimator.pair_reader.config.timeout == 3.0
    assert estimator.pair_reader.config.block_identifier == "latest"


def test_build_estimator_uses_configured_node(config):
    with patch("src.scripts.run_estimator_api.Web3") as web3_cls:
        build_estimator(config)

    web3_cls.HTTPProvider.assert_called_once_with(
        "http://localhost:8545", request_kwargs={"timeout": 3.0}
    )


def test_check_chain_warns_on_mismatch(caplog):
    web3 = MagicMock()
    web3.eth.chain_id = 8453

    with caplog.at_level(logging.WARNING):
        check_chain(web3, 1)

    assert "chain 8453" in caplog.text


def test_check_chain_tolerates_unreachable_node(caplog):
    web3 = MagicMock()
    type(web3.eth).chain_id = PropertyMock(side_effect=ConnectionError("refused"))

    with caplog.at_level(logging.WARNING):
        check_chain(web3, 1)

    assert "Could not reach node" in caplog.text
