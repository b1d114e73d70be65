from typing import Any, List, Optional
from httpx import Headers
from .types import AttemptFailure

class ZeroExClientError(Exception):
    """Raised when the 0x API answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        headers: Optional[Headers] = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.headers = headers if headers is not None else Headers()
        self.body = body

class TransactionRevertedError(Exception):
    """Raised when a mined transaction reports `status == 0`."""

    def __init__(self, tx_hash: str, block_number: Optional[int] = None):
        super().__init__(f"Transaction {tx_hash} reverted")
        self.tx_hash = tx_hash
        self.block_number = block_number

class SwapExecutionError(Exception):
    """Raised when no swap attempt succeeded.

    The individual attempt errors are kept in `failures`; the last one is also
    chained as `__cause__`.
    """

    def __init__(self, message: str, failures: Optional[List[AttemptFailure]] = None, retryable: bool = True):
        super().__init__(message)
        self.failures = failures or []
        self.retryable = retryable

    @property
    def attempts(self) -> int:
        return len(self.failures)
