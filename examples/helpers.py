from typing import Tuple
from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3
from zeroex_swap import ZeroExClient
from zeroex_swap.config import get_client as _get_client, get_wallet as _get_wallet, load_settings

# Common constants (Base)
WETH = "0x4200000000000000000000000000000000000006"
BUY_TOKEN = "0xE3086852A4B125803C815a158249ae468A3254Ca"

def get_client() -> ZeroExClient:
    """Get a ZeroExClient from environment variables.

    Raises:
        ValueError: If required environment variables are not set
    """
    return _get_client(load_settings())

def get_wallet() -> Tuple[AsyncWeb3, LocalAccount]:
    """Get an AsyncWeb3 instance and account from environment variables.

    Raises:
        ValueError: If required environment variables are not set
    """
    return _get_wallet(load_settings())
