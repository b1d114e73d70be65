"""Pytest configuration and fakes for the RPC side of a swap."""

import asyncio
import pytest
from eth_account import Account
from zeroex_swap.types import Quote

# Disable web3.tools.pytest_ethereum plugin which has compatibility issues
pytest_plugins = []

TEST_PRIVATE_KEY = "0x" + "11" * 32
WETH = "0x4200000000000000000000000000000000000006"
BUY_TOKEN = "0xE3086852A4B125803C815a158249ae468A3254Ca"


def pytest_configure(config):
    """Configure pytest to skip problematic plugins."""
    config.pluginmanager.set_blocked("web3.tools.pytest_ethereum")


class FakeCall:
    def __init__(self, eth, name, args):
        self._eth = eth
        self._name = name
        self._args = args

    async def call(self):
        self._eth.calls.append((self._name, self._args))
        return self._eth.allowance

    async def transact(self, params):
        self._eth.calls.append((self._name, self._args))
        self._eth.approvals.append((self._args, params))
        return b"\xaa" * 32


class FakeFunctions:
    def __init__(self, eth):
        self._eth = eth

    def allowance(self, owner, spender):
        return FakeCall(self._eth, "allowance", (owner, spender))

    def approve(self, spender, amount):
        return FakeCall(self._eth, "approve", (spender, amount))


class FakeContract:
    def __init__(self, eth, address):
        self.address = address
        self.functions = FakeFunctions(eth)


class FakeEth:
    """Scripted stand-in for `AsyncWeb3.eth`.

    `send_outcomes` and `receipt_outcomes` are consumed one per call; an
    exception instance is raised, anything else is returned.
    """

    def __init__(self, allowance=0, send_outcomes=None, receipt_outcomes=None):
        self.allowance = allowance
        self.send_outcomes = list(send_outcomes or [])
        self.receipt_outcomes = list(receipt_outcomes or [])
        self.calls = []
        self.sent = []
        self.approvals = []

    def contract(self, address, abi):
        return FakeContract(self, address)

    async def send_transaction(self, tx):
        self.calls.append(("send_transaction", tx))
        self.sent.append(tx)
        outcome = self.send_outcomes.pop(0) if self.send_outcomes else bytes([len(self.sent)]) * 32
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def wait_for_transaction_receipt(self, tx_hash):
        self.calls.append(("wait_for_transaction_receipt", tx_hash))
        outcome = self.receipt_outcomes.pop(0) if self.receipt_outcomes else {"status": 1, "blockNumber": 100}
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeWeb3:
    def __init__(self, eth):
        self.eth = eth


@pytest.fixture
def account():
    return Account.from_key(TEST_PRIVATE_KEY)


@pytest.fixture
def make_w3():
    def _make(**kwargs):
        return FakeWeb3(FakeEth(**kwargs))
    return _make


@pytest.fixture
def quote():
    return Quote(**{
        "sellTokenAddress": WETH,
        "buyTokenAddress": BUY_TOKEN,
        "sellAmount": "10000000000000",
        "buyAmount": "42",
        "to": "0xRouter",
        "data": "0xabc",
        "value": "10000000000000",
        "gas": "100000",
        "gasPrice": "1000000000",
        "allowanceTarget": "0xSpender",
    })


@pytest.fixture(autouse=True)
def recorded_sleeps(monkeypatch):
    """Record asyncio.sleep durations instead of sleeping."""
    sleeps = []

    async def fake_sleep(seconds, *args, **kwargs):
        sleeps.append(seconds)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    return sleeps
