from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from dataclasses import dataclass
from typing import Optional, Dict, Any
from web3 import Web3

# Pseudo address the 0x API uses for the chain's native token
NATIVE_TOKEN_ADDRESS = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"

class BaseModelWithConfig(BaseModel):
    """Base model with common configuration"""
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def model_dump(self, **kwargs) -> Dict[str, Any]:
        data = super().model_dump(**kwargs)
        return self._remove_none_recursive(data)

    def _remove_none_recursive(self, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                k: self._remove_none_recursive(v)
                for k, v in data.items()
                if v is not None
            }
        elif isinstance(data, list):
            return [self._remove_none_recursive(item) for item in data]
        return data

class QuoteRequest(BaseModelWithConfig):
    sell_token: str
    buy_token: str
    sell_amount: int = Field(ge=0)
    taker_address: Optional[str] = None
    slippage_percentage: Optional[float] = Field(default=None, ge=0, le=1)

    def to_query_params(self) -> Dict[str, str]:
        """Query parameters in the camelCase form the API expects"""
        return {k: str(v) for k, v in self.model_dump(by_alias=True).items()}

class Quote(BaseModelWithConfig):
    sell_token_address: Optional[str] = None
    buy_token_address: Optional[str] = None
    sell_amount: Optional[int] = Field(default=None, ge=0)
    buy_amount: Optional[int] = Field(default=None, ge=0)
    to: str
    data: str
    value: int = Field(ge=0)
    gas: int = Field(ge=0)
    gas_price: int = Field(ge=0)
    allowance_target: str
    price: Optional[str] = None
    estimated_gas: Optional[int] = Field(default=None, ge=0)
    chain_id: Optional[int] = None

@dataclass
class AttemptFailure:
    """A single failed swap attempt"""
    attempt: int
    error: Exception

@dataclass
class SwapReceipt:
    """The outcome of a confirmed swap"""
    tx_hash: str
    block_number: int
    # Number of attempts used, including the successful one
    attempts: int

def to_checksum_if_address(value: str) -> str:
    """Checksum `value` if it is a valid address, otherwise return it unchanged"""
    return Web3.to_checksum_address(value) if Web3.is_address(value) else value
