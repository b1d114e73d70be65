import asyncio

import pytest

from zeroex_swap.allowance import get_allowance, is_native_token, set_allowance_if_needed
from zeroex_swap.errors import TransactionRevertedError
from zeroex_swap.types import NATIVE_TOKEN_ADDRESS

WETH = "0x4200000000000000000000000000000000000006"
SPENDER = "0xdef1c0ded9bec7f1a1670819833240f027b25eff"
SPENDER_CHECKSUM = "0xDef1C0ded9bec7F1a1670819833240f027b25EfF"


def test_get_allowance_checksums_addresses(account, make_w3):
    w3 = make_w3(allowance=123)
    assert asyncio.run(get_allowance(w3, WETH, account.address.lower(), SPENDER)) == 123
    assert w3.eth.calls == [("allowance", (account.address, SPENDER_CHECKSUM))]


@pytest.mark.parametrize("current", [10**18, 10**18 + 1])
def test_sufficient_allowance_sends_nothing(account, make_w3, current):
    w3 = make_w3(allowance=current)

    tx_hash = asyncio.run(set_allowance_if_needed(w3, account, WETH, SPENDER, 10**18))

    assert tx_hash is None
    assert w3.eth.approvals == []
    assert [c[0] for c in w3.eth.calls] == ["allowance"]


def test_insufficient_allowance_approves_once(account, make_w3):
    w3 = make_w3(allowance=10**18 - 1)

    tx_hash = asyncio.run(set_allowance_if_needed(w3, account, WETH, SPENDER, 10**18))

    assert tx_hash == "0x" + "aa" * 32
    assert w3.eth.approvals == [((SPENDER_CHECKSUM, 10**18), {"from": account.address})]
    assert [c[0] for c in w3.eth.calls] == ["allowance", "approve", "wait_for_transaction_receipt"]


def test_reverted_approval_raises(account, make_w3):
    w3 = make_w3(allowance=0, receipt_outcomes=[{"status": 0, "blockNumber": 9}])

    with pytest.raises(TransactionRevertedError) as exc_info:
        asyncio.run(set_allowance_if_needed(w3, account, WETH, SPENDER, 1))

    assert exc_info.value.tx_hash == "0x" + "aa" * 32
    assert exc_info.value.block_number == 9


def test_native_token_needs_no_allowance(account, make_w3):
    w3 = make_w3(allowance=0)

    assert asyncio.run(set_allowance_if_needed(w3, account, NATIVE_TOKEN_ADDRESS.lower(), SPENDER, 1)) is None
    assert w3.eth.calls == []


def test_is_native_token():
    assert is_native_token("0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee")
    assert not is_native_token(WETH)
