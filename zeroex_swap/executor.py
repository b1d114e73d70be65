"""Submission of 0x swap transactions with bounded retries."""

import asyncio
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, List
import aiohttp
from deprecated import deprecated
from eth_account.signers.local import LocalAccount
from httpx import TransportError
from loguru import logger
from web3 import AsyncWeb3, Web3
from web3.exceptions import ProviderConnectionError, TimeExhausted
from web3.types import TxParams
from .errors import SwapExecutionError, TransactionRevertedError
from .types import AttemptFailure, Quote, SwapReceipt, to_checksum_if_address

DEFAULT_RETRY_COUNT = 3
DEFAULT_RETRY_DELAY = timedelta(milliseconds=3000)

# Multiplier applied to the quoted gas estimate
GAS_LIMIT_MULTIPLIER = 2

ALL_ATTEMPTS_FAILED_MESSAGE = "All swap execution attempts failed."

# httpx for the 0x API, aiohttp for the AsyncHTTPProvider RPC transport
TRANSIENT_ERROR_TYPES = (
    TransportError,
    aiohttp.ClientError,
    ProviderConnectionError,
    asyncio.TimeoutError,
    TimeExhausted,
    ConnectionError,
)

TRANSIENT_ERROR_KEYWORDS = (
    "connection",
    "timeout",
    "timed out",
    "network",
    "unreachable",
    "refused",
    "reset",
    "broken pipe",
    "unavailable",
    "bad gateway",
    "nonce too low",
    "replacement transaction underpriced",
)

def retry_always(error: Exception) -> bool:
    return True

def is_transient_error(error: Exception) -> bool:
    """Check whether an error is worth retrying.

    Network failures and confirmation timeouts are transient; reverts, bad
    parameters and insufficient funds are not.
    """
    if isinstance(error, TransactionRevertedError):
        return False
    if isinstance(error, TRANSIENT_ERROR_TYPES):
        return True

    error_str = str(error).lower()
    return any(keyword in error_str for keyword in TRANSIENT_ERROR_KEYWORDS)

@dataclass
class SwapExecutionOptions:
    retry_count: int = DEFAULT_RETRY_COUNT
    retry_delay: timedelta = DEFAULT_RETRY_DELAY
    should_retry: Callable[[Exception], bool] = field(default=retry_always)

    @classmethod
    def new(cls) -> "SwapExecutionOptions":
        return cls()

    def with_retry_count(self, retry_count: int) -> "SwapExecutionOptions":
        if retry_count < 0:
            raise ValueError("retry_count must be non-negative")
        self.retry_count = retry_count
        return self

    def with_retry_delay(self, retry_delay: timedelta) -> "SwapExecutionOptions":
        self.retry_delay = retry_delay
        return self

    def with_retry_predicate(self, should_retry: Callable[[Exception], bool]) -> "SwapExecutionOptions":
        self.should_retry = should_retry
        return self

    def with_transient_retries_only(self) -> "SwapExecutionOptions":
        return self.with_retry_predicate(is_transient_error)

def build_swap_tx(quote: Quote, sender: str) -> TxParams:
    """Build the swap transaction for a quote, doubling the quoted gas estimate.

    Args:
        quote: The quote to execute
        sender: The address submitting the transaction

    Returns:
        Legacy transaction params ready for `eth_sendTransaction`
    """
    to = to_checksum_if_address(quote.to)
    return {
        "from": sender,
        "to": to,
        "data": quote.data,
        "value": quote.value,
        "gasPrice": quote.gas_price,
        "gas": quote.gas * GAS_LIMIT_MULTIPLIER,
    }

async def _submit_and_confirm(w3: AsyncWeb3, tx: TxParams, attempt: int) -> SwapReceipt:
    tx_hash = await w3.eth.send_transaction(tx)
    tx_hash_hex = Web3.to_hex(tx_hash)
    logger.info("Transaction hash: {}", tx_hash_hex)

    receipt = await w3.eth.wait_for_transaction_receipt(tx_hash)
    if receipt["status"] == 0:
        raise TransactionRevertedError(tx_hash_hex, receipt["blockNumber"])

    logger.info("Transaction confirmed in block: {}", receipt["blockNumber"])
    return SwapReceipt(tx_hash=tx_hash_hex, block_number=receipt["blockNumber"], attempts=attempt)

async def execute_swap(
    w3: AsyncWeb3,
    account: LocalAccount,
    quote: Quote,
    options: SwapExecutionOptions,
) -> SwapReceipt:
    """Submit the swap for `quote`, retrying failed attempts.

    Each attempt sends the transaction and waits for its receipt; a failure in
    either step counts as a failed attempt. Returns on the first confirmed
    attempt.

    Args:
        w3: An AsyncWeb3 instance with a signing middleware for `account`
        account: The account submitting the swap
        quote: The quote to execute
        options: Retry configuration

    Returns:
        The receipt of the confirmed swap

    Raises:
        SwapExecutionError: If every attempt failed, or an attempt failed with
            an error `options.should_retry` rejects
    """
    tx = build_swap_tx(quote, account.address)
    delay_seconds = options.retry_delay.total_seconds()
    failures: List[AttemptFailure] = []

    for attempt in range(options.retry_count):
        try:
            receipt = await _submit_and_confirm(w3, dict(tx), attempt + 1)
        except Exception as e:
            failures.append(AttemptFailure(attempt=attempt + 1, error=e))
            if not options.should_retry(e):
                logger.error("Attempt {}: Swap execution failed with a non-retryable error: {}", attempt + 1, e)
                raise SwapExecutionError(
                    "Swap execution failed with a non-retryable error.",
                    failures=failures,
                    retryable=False,
                ) from e

            logger.warning(
                "Attempt {}: Swap execution failed. Retrying in {} seconds. {}",
                attempt + 1, delay_seconds, e,
            )
            if attempt < options.retry_count - 1:
                await asyncio.sleep(delay_seconds)
            continue

        return receipt

    logger.error(ALL_ATTEMPTS_FAILED_MESSAGE)
    last_error = failures[-1].error if failures else None
    raise SwapExecutionError(ALL_ATTEMPTS_FAILED_MESSAGE, failures=failures) from last_error

@deprecated(version="0.2.0", reason="Pass SwapExecutionOptions to execute_swap instead")
async def execute_swap_with_retries(
    w3: AsyncWeb3,
    account: LocalAccount,
    quote: Quote,
    retry_count: int = DEFAULT_RETRY_COUNT,
    retry_delay: int = 3000,
) -> SwapReceipt:
    """Execute a swap with the retry count and delay (in milliseconds) as arguments."""
    options = SwapExecutionOptions(retry_count=retry_count, retry_delay=timedelta(milliseconds=retry_delay))
    return await execute_swap(w3, account, quote, options)
