"""Example of selling WETH for a token on Base through the 0x API."""

import asyncio
import sys
from datetime import timedelta
from web3 import Web3
from zeroex_swap import QuoteRequest, SwapExecutionOptions, report_error, run_swap
from examples.helpers import WETH, BUY_TOKEN, get_client, get_wallet

async def swap_token() -> None:
    """Fetch a quote, set the allowance if needed, and execute the swap."""
    request = QuoteRequest(
        sell_token=WETH,
        buy_token=BUY_TOKEN,
        sell_amount=Web3.to_wei("0.00001", "ether"),
    )
    # Approve 1 WETH so later swaps skip the approval
    allowance_amount = Web3.to_wei(1, "ether")

    options = (
        SwapExecutionOptions.new()
        .with_retry_count(3)
        .with_retry_delay(timedelta(milliseconds=3000))
    )

    print("Fetching quote for the swap...")
    client = get_client()
    w3, account = get_wallet()
    try:
        receipt = await run_swap(client, w3, account, request, allowance_amount, options)
    finally:
        await client.aclose()

    print(f"Swap executed successfully: {receipt.tx_hash} (block {receipt.block_number})")

def main() -> None:
    try:
        asyncio.run(swap_token())
    except Exception as e:
        report_error(e)
        sys.exit(1)

if __name__ == "__main__":
    main()
