"""ERC20 allowance checks for the 0x allowance target."""

from typing import Optional
from eth_account.signers.local import LocalAccount
from loguru import logger
from web3 import AsyncWeb3, Web3
from .errors import TransactionRevertedError
from .types import NATIVE_TOKEN_ADDRESS, to_checksum_if_address

ERC20_ABI = [
    {
        "constant": True,
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "spender", "type": "address"},
        ],
        "name": "allowance",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": False,
        "inputs": [
            {"name": "spender", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "name": "approve",
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

def is_native_token(token: str) -> bool:
    return token.lower() == NATIVE_TOKEN_ADDRESS.lower()

async def get_allowance(w3: AsyncWeb3, token: str, owner: str, spender: str) -> int:
    """Read the amount of `token` that `spender` may move on behalf of `owner`."""
    contract = w3.eth.contract(address=to_checksum_if_address(token), abi=ERC20_ABI)
    allowance = await contract.functions.allowance(
        to_checksum_if_address(owner),
        to_checksum_if_address(spender),
    ).call()
    return int(allowance)

async def set_allowance_if_needed(
    w3: AsyncWeb3,
    account: LocalAccount,
    token: str,
    spender: str,
    amount: int,
) -> Optional[str]:
    """Approve `spender` for `amount` of `token` when the current allowance is lower.

    Args:
        w3: An AsyncWeb3 instance with a signing middleware for `account`
        account: The token owner
        token: The ERC20 token address
        spender: The contract that needs the allowance (the quote's allowance target)
        amount: The required allowance

    Returns:
        The approval transaction hash, or None if no approval was needed

    Raises:
        TransactionRevertedError: If the approval transaction reverted
    """
    if is_native_token(token):
        logger.info("Native token sell, no allowance needed")
        return None

    current = await get_allowance(w3, token, account.address, spender)
    if current >= amount:
        logger.info("Sufficient allowance already set ({} >= {})", current, amount)
        return None

    logger.info("Setting allowance for token {} to {} (current {})", token, amount, current)
    contract = w3.eth.contract(address=to_checksum_if_address(token), abi=ERC20_ABI)
    tx_hash = await contract.functions.approve(
        to_checksum_if_address(spender), amount
    ).transact({"from": account.address})
    receipt = await w3.eth.wait_for_transaction_receipt(tx_hash)

    tx_hash_hex = Web3.to_hex(tx_hash)
    if receipt["status"] == 0:
        raise TransactionRevertedError(tx_hash_hex, receipt["blockNumber"])

    logger.info("Allowance set. Transaction hash: {}", tx_hash_hex)
    return tx_hash_hex
