from .client import ZeroExClient, RequestQuoteOptions
from .http import ZeroExHttpClient
from .errors import ZeroExClientError, SwapExecutionError, TransactionRevertedError
from .executor import SwapExecutionOptions, execute_swap, execute_swap_with_retries, build_swap_tx, is_transient_error
from .allowance import get_allowance, set_allowance_if_needed
from .swap import run_swap, report_error
from .types import Quote, QuoteRequest, SwapReceipt, AttemptFailure

__all__ = [
    "ZeroExClient",
    "RequestQuoteOptions",
    "ZeroExClientError",
    "ZeroExHttpClient",
    "SwapExecutionError",
    "TransactionRevertedError",
    "SwapExecutionOptions",
    "execute_swap",
    "execute_swap_with_retries",
    "build_swap_tx",
    "is_transient_error",
    "get_allowance",
    "set_allowance_if_needed",
    "run_swap",
    "report_error",
    "Quote",
    "QuoteRequest",
    "SwapReceipt",
    "AttemptFailure",
]
