import os
from typing import Tuple
from dotenv import load_dotenv
from eth_account import Account
from eth_account.signers.local import LocalAccount
from pydantic import BaseModel
from web3 import AsyncWeb3
from web3.middleware import SignAndSendRawMiddlewareBuilder
from .client import BASE_BASE_URL, ZeroExClient

ENV_VARS = {
    "zerox_api_key": "ZEROX_API_KEY",
    "wallet_private_key": "WALLET_PRIVATE_KEY",
    "rpc_provider_url": "RPC_PROVIDER_URL",
}
BASE_URL_ENV_VAR = "ZEROX_BASE_URL"

class Settings(BaseModel):
    zerox_api_key: str
    wallet_private_key: str
    rpc_provider_url: str
    zerox_base_url: str = BASE_BASE_URL

def load_settings(dotenv: bool = True) -> Settings:
    """Load settings from the environment, reading a `.env` file first.

    Raises:
        ValueError: If a required environment variable is not set
    """
    if dotenv:
        load_dotenv(override=True)

    values = {field: os.getenv(var) for field, var in ENV_VARS.items()}
    missing = [ENV_VARS[field] for field, value in values.items() if not value]
    if missing:
        raise ValueError(f"{', '.join(missing)} environment variable(s) not set")

    base_url = os.getenv(BASE_URL_ENV_VAR)
    if base_url:
        values["zerox_base_url"] = base_url
    return Settings(**values)

def get_client(settings: Settings) -> ZeroExClient:
    return ZeroExClient(settings.zerox_api_key, settings.zerox_base_url)

def get_wallet(settings: Settings) -> Tuple[AsyncWeb3, LocalAccount]:
    """Get an AsyncWeb3 instance that signs and sends with the configured wallet.

    Returns:
        A tuple of (AsyncWeb3 instance, LocalAccount)
    """
    w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(settings.rpc_provider_url))
    account: LocalAccount = Account.from_key(settings.wallet_private_key)
    w3.eth.default_account = account.address
    w3.middleware_onion.inject(SignAndSendRawMiddlewareBuilder.build(account), layer=0)

    return w3, account
