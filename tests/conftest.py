"""
Test fixtures and configuration.
"""

import pytest
from eth_account import Account

from humanid_gate.core.config import build_settings
from humanid_gate.services.challenges import InMemoryChallengeStore
from humanid_gate.services.verification import VerificationFlow
from tests.helpers import ROLE_NAME, FakeOracle, FakeRoleGateway


@pytest.fixture
def settings():
    return build_settings(BOT_TOKEN="test-token", ROLE_NAME=ROLE_NAME)


@pytest.fixture
def holder():
    """Account whose address holds one SBT."""
    return Account.create()


@pytest.fixture
def stranger():
    return Account.create()


@pytest.fixture
def store():
    return InMemoryChallengeStore()


@pytest.fixture
def oracle(holder):
    return FakeOracle(balances={holder.address: 1})


@pytest.fixture
def roles():
    return FakeRoleGateway()


@pytest.fixture
def flow(store, oracle, roles):
    return VerificationFlow(store=store, oracle=oracle, roles=roles, role_name=ROLE_NAME)
