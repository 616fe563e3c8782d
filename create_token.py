# create_token.py

import logging
import sys
import traceback

from solana.rpc.api import Client
from solana.rpc.commitment import Confirmed
from solana.rpc.types import TxOpts
from solders.pubkey import Pubkey
from spl.token.client import Token
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import get_associated_token_address

import config
from secret_key import SecretKeyError, keypair_from_secret_key
from token_metadata import attach_metadata as send_metadata

logger = logging.getLogger(__name__)


def get_or_create_token_account(client, token_client, owner: Pubkey) -> Pubkey:
    address = get_associated_token_address(owner, token_client.pubkey)
    account_info = client.get_account_info(address)
    if account_info.value is not None:
        logger.info("Associated token account already exists: %s", address)
        return address
    return token_client.create_associated_token_account(owner=owner, skip_confirmation=False)


def create_token(secret_key_string, client=None, attach_metadata=None):
    """
    Mint the configured token supply into the wallet behind `secret_key_string`.

    Returns a dict with the addresses and signatures, or None when any step
    failed. Errors are reported, not raised.
    """
    if attach_metadata is None:
        attach_metadata = config.ATTACH_METADATA

    try:
        from_wallet = keypair_from_secret_key(secret_key_string)
    except SecretKeyError as e:
        print(f"😿 {e} Please provide a valid base58 string or JSON array.")
        return None

    try:
        print(f"👑 Wallet public key: {from_wallet.pubkey()}")

        if client is None:
            client = Client(config.RPC_URL, commitment=Confirmed)
        print(f"🔌 Connected to {config.RPC_URL}")

        # Step 1: CREATE THE TOKEN'S MINT ACCOUNT
        print("🚀 Step 1: Creating token mint...")
        token_client = Token.create_mint(
            conn=client,
            payer=from_wallet,
            mint_authority=from_wallet.pubkey(),
            decimals=config.TOKEN_DECIMALS,
            program_id=TOKEN_PROGRAM_ID,
            freeze_authority=from_wallet.pubkey(),
            skip_confirmation=False,
        )
        mint = token_client.pubkey
        print(f"✅ Token mint created: {mint}")

        # Step 2: GET OR CREATE A TOKEN ACCOUNT FOR THE WALLET
        print("\n🚀 Step 2: Getting or creating token account...")
        token_account = get_or_create_token_account(client, token_client, from_wallet.pubkey())
        print(f"✅ Token account: {token_account}")

        # Step 3: MINT THE TOTAL SUPPLY
        print(f"\n🚀 Step 3: Minting {config.TOKEN_AMOUNT / (10**config.TOKEN_DECIMALS):,} tokens...")
        resp = token_client.mint_to(
            dest=token_account,
            mint_authority=from_wallet,
            amount=config.TOKEN_AMOUNT,
            opts=TxOpts(skip_confirmation=False, preflight_commitment=Confirmed),
        )
        mint_signature = resp.value
        print(f"✅ Minting signature: {mint_signature}")

        # Step 4: ATTACH ON-CHAIN METADATA
        metadata_signature = None
        if attach_metadata:
            print(f"\n🚀 Step 4: Creating metadata for {config.TOKEN_NAME} ({config.TOKEN_SYMBOL}): {config.TOKEN_DESCRIPTION}")
            metadata_signature = send_metadata(
                client,
                from_wallet,
                mint,
                name=config.TOKEN_NAME,
                symbol=config.TOKEN_SYMBOL,
                uri=config.TOKEN_METADATA_URI,
            )
            print(f"✅ Metadata created: {metadata_signature}")

        balance = client.get_token_account_balance(token_account).value.ui_amount

        print(f"\nToken Mint Address: {mint}")
        print(f"Token Account Address: {token_account}")
        print(f"Token Balance: {balance}")
        print("\n🎉🎉🎉 ALL DONE! Your new token is ready! 🎉🎉🎉")

        return {
            "mint": mint,
            "token_account": token_account,
            "mint_signature": mint_signature,
            "metadata_signature": metadata_signature,
            "balance": balance,
        }

    except Exception:
        print("😿 An error occurred. Here is the full error report:")
        traceback.print_exc()
        return None


def main(prompt=input):
    """Run the workflow once. Returns the process exit status."""
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO))

    secret_key_string = config.SECRET_KEY
    if not secret_key_string:
        secret_key_string = prompt("Please enter your wallet secret key: ")

    result = create_token(secret_key_string.strip())
    return 0 if result else 1


if __name__ == "__main__":
    sys.exit(main())
