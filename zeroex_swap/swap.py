import sys
from typing import Optional, TextIO
from eth_account.signers.local import LocalAccount
from httpx import RequestError
from loguru import logger
from web3 import AsyncWeb3
from .allowance import set_allowance_if_needed
from .client import ZeroExClient
from .errors import ZeroExClientError
from .executor import SwapExecutionOptions, execute_swap
from .types import QuoteRequest, SwapReceipt

async def run_swap(
    client: ZeroExClient,
    w3: AsyncWeb3,
    account: LocalAccount,
    request: QuoteRequest,
    allowance_amount: int,
    options: Optional[SwapExecutionOptions] = None,
) -> SwapReceipt:
    """Quote, approve if needed, then execute a swap.

    Args:
        client: The 0x API client
        w3: An AsyncWeb3 instance with a signing middleware for `account`
        account: The wallet selling `request.sell_token`
        request: What to sell and buy
        allowance_amount: The allowance required for the quote's allowance target
        options: Retry configuration for the swap submission

    Returns:
        The receipt of the confirmed swap
    """
    options = options or SwapExecutionOptions.new()

    quote = await client.request_quote(request)
    logger.info(
        "Quote received: sell {} of {} for {} of {}",
        request.sell_amount, request.sell_token,
        quote.buy_amount if quote.buy_amount is not None else "an unquoted amount", request.buy_token,
    )

    await set_allowance_if_needed(w3, account, request.sell_token, quote.allowance_target, allowance_amount)

    logger.info("Executing swap...")
    receipt = await execute_swap(w3, account, quote, options)
    logger.info("Swap executed successfully in {} attempt(s)", receipt.attempts)
    return receipt

def report_error(error: BaseException, stream: TextIO = sys.stderr) -> None:
    """Print an error to `stream`, split by where it happened."""
    if isinstance(error, ZeroExClientError):
        # The API answered with a non-2xx status
        print("Error Data:", error.body, file=stream)
        print("Error Status:", error.status_code, file=stream)
        print("Error Headers:", dict(error.headers), file=stream)
    elif isinstance(error, RequestError):
        # No response was received
        try:
            request = error.request
        except RuntimeError:
            # Raised by httpx when the error was built without a request
            request = error
        print("No response received:", request, file=stream)
    else:
        print("Error:", error, file=stream)
        if error.__cause__ is not None:
            print("Caused by:", repr(error.__cause__), file=stream)
