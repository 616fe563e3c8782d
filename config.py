# config.py

import os
from dotenv import load_dotenv

# --- Load Secret Environment Variables ---
load_dotenv()


def _int_setting(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip().replace("_", ""))
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _bool_setting(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be true or false, got {raw!r}")


def check_token_settings(decimals, amount):
    if not 0 <= decimals <= 255:
        raise ValueError("TOKEN_DECIMALS must fit in a single byte!")
    if not 0 < amount < 2**64:
        raise ValueError("TOKEN_AMOUNT must be a positive 64-bit amount!")


# --- CONFIGURATION ---
RPC_URL = os.getenv("RPC_URL", "https://api.devnet.solana.com")

# Optional. When empty the wallet secret key is asked for interactively.
SECRET_KEY = os.getenv("SECRET_KEY", "").strip()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Token details
TOKEN_NAME = os.getenv("TOKEN_NAME", "ClickScore")
TOKEN_SYMBOL = os.getenv("TOKEN_SYMBOL", "CLS")
TOKEN_DESCRIPTION = os.getenv("TOKEN_DESCRIPTION", "ClickScore token on Solana devnet")
TOKEN_DECIMALS = _int_setting("TOKEN_DECIMALS", 9)
TOKEN_AMOUNT = _int_setting("TOKEN_AMOUNT", 10_000_000_000 * (10**9))  # 10 billion with 9 decimals
TOKEN_METADATA_URI = os.getenv(
    "TOKEN_METADATA_URI",
    "https://raw.githubusercontent.com/your-username/your-repo/main/token-metadata.json",
)
ATTACH_METADATA = _bool_setting("ATTACH_METADATA", True)

check_token_settings(TOKEN_DECIMALS, TOKEN_AMOUNT)
