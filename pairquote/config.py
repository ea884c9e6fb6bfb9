"""
pairquote configuration — loads env vars, validates, fails fast on malformed values.

Everything here has a working default, so importing the library needs no .env.
Overrides exist for pinning a different V2 deployment:
  - UNISWAP_V2_FACTORY   factory that deploys the pairs
  - PAIR_INIT_CODE_HASH  keccak256 of the pair creation bytecode
  - RPC_URL              endpoint for Web3ReserveOracle.from_url callers
  - LOG_LEVEL
"""

import logging
import os
import sys
from pathlib import Path
from dotenv import load_dotenv

from pairquote.constants import ZERO_ADDRESS, MAX_UINT256, CREATE2_PREFIX

# Load .env from project root
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path)

_WARNINGS: list = []  # collected during load, printed at summary


def _optional(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def _validate_address(addr: str, label: str) -> str:
    """Validate an Ethereum address: 0x-prefixed, 42 chars, valid hex."""
    if not addr.startswith("0x") or len(addr) != 42:
        print(f"FATAL: {label} is not a valid address: {addr}", file=sys.stderr)
        sys.exit(1)
    try:
        int(addr, 16)
    except ValueError:
        print(f"FATAL: {label} contains invalid hex: {addr}", file=sys.stderr)
        sys.exit(1)
    return addr


def _validate_hash(value: str, label: str) -> str:
    """Validate a 32-byte hash: 64 hex chars (with or without 0x prefix)."""
    raw = value[2:] if value.startswith("0x") else value
    if len(raw) != 64:
        print(f"FATAL: {label} must be 64 hex chars (got {len(raw)})", file=sys.stderr)
        sys.exit(1)
    try:
        int(raw, 16)
    except ValueError:
        print(f"FATAL: {label} contains invalid hex", file=sys.stderr)
        sys.exit(1)
    return "0x" + raw.lower()


def _validate_url(url: str, label: str) -> str:
    """Validate a URL starts with http:// or https://."""
    if not url.startswith(("http://", "https://")):
        print(f"FATAL: {label} must start with http:// or https://: {url}", file=sys.stderr)
        sys.exit(1)
    return url


# === V2 deployment (Base mainnet factory by default) ===
UNISWAP_V2_FACTORY: str = _validate_address(
    _optional("UNISWAP_V2_FACTORY", "0x8909Dc15e40173Ff4699343b6eB8132c65e18eC6"),
    "UNISWAP_V2_FACTORY",
)

# Must equal keccak256 of the exact pair bytecode the factory deploys, or every
# derived pair address is wrong. Same value on Ethereum and Base V2.
PAIR_INIT_CODE_HASH: str = _validate_hash(
    _optional(
        "PAIR_INIT_CODE_HASH",
        "0x96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f",
    ),
    "PAIR_INIT_CODE_HASH",
)

# === RPC (only needed by callers building a Web3ReserveOracle) ===
RPC_URL: str = _optional("RPC_URL", "")
if RPC_URL:
    _validate_url(RPC_URL, "RPC_URL")
else:
    _WARNINGS.append("RPC_URL not set, Web3ReserveOracle.from_url() needs an explicit url")

# === Logging ===
LOG_LEVEL: str = _optional("LOG_LEVEL", "INFO")
if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR"):
    _WARNINGS.append(f"Unknown LOG_LEVEL '{LOG_LEVEL}', defaulting to INFO")
    LOG_LEVEL = "INFO"

logging.getLogger("pairquote").setLevel(LOG_LEVEL)


def print_config_summary() -> None:
    """Print a non-sensitive config summary for startup verification."""
    print("--- pairquote Config ---")
    print(f"  V2 factory:     {UNISWAP_V2_FACTORY}")
    print(f"  Init code hash: {PAIR_INIT_CODE_HASH[:18]}...")
    print(f"  RPC:            {RPC_URL[:40] + '...' if RPC_URL else '(unset)'}")
    print(f"  Log level:      {LOG_LEVEL}")
    if _WARNINGS:
        print(f"  ⚠️  {len(_WARNINGS)} config warning(s):")
        for w in _WARNINGS:
            print(f"    - {w}")
    print("-" * 24)
