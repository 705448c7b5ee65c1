import os

import pytest
from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_utils import to_checksum_address


@pytest.fixture
def recipient() -> str:
    return to_checksum_address(os.urandom(20))


@pytest.fixture
def sender() -> str:
    return to_checksum_address(os.urandom(20))


@pytest.fixture
def account() -> LocalAccount:
    return Account.create()
