"""
PairKey — canonical token ordering and deterministic V2 pair addresses.

A V2 factory deploys each pair with CREATE2, salted by the sorted token pair,
so any party can compute the pair address offline:

    salt = keccak256(abi.encodePacked(token0, token1))
    pair = keccak256(0xff ++ factory ++ salt ++ init_code_hash)[12:]
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from eth_abi.packed import encode_packed
from web3 import Web3

from pairquote.config import PAIR_INIT_CODE_HASH
from pairquote.constants import CREATE2_PREFIX, ZERO_ADDRESS
from pairquote.errors import IdenticalTokensError, ZeroAddressError

log = logging.getLogger(__name__)

_INIT_CODE_HASH_BYTES = bytes.fromhex(PAIR_INIT_CODE_HASH[2:])


@dataclass(frozen=True)
class PairKey:
    """Canonically ordered token pair: token0 < token1, token0 never zero."""
    token0: str     # checksummed
    token1: str     # checksummed

    @property
    def canonical(self) -> str:
        return f"{self.token0.lower()}:{self.token1.lower()}"

    def __repr__(self) -> str:
        return f"Pair({self.token0[:10]}.../{self.token1[:10]}...)"


def _address_bytes(addr: str) -> bytes:
    return bytes.fromhex(addr[2:])


def canonicalize(token_a: str, token_b: str) -> Tuple[str, str]:
    """Sort two token addresses into (token0, token1), as the factory does."""
    a = Web3.to_checksum_address(token_a)
    b = Web3.to_checksum_address(token_b)
    if a == b:
        raise IdenticalTokensError(a)

    # Compare as 160-bit big-endian values, same as Solidity address comparison
    token0, token1 = (a, b) if _address_bytes(a) < _address_bytes(b) else (b, a)
    if token0 == ZERO_ADDRESS:
        raise ZeroAddressError(f"{token_a} / {token_b}")
    return token0, token1


def pair_key(token_a: str, token_b: str) -> PairKey:
    token0, token1 = canonicalize(token_a, token_b)
    return PairKey(token0, token1)


def pair_salt(token0: str, token1: str) -> bytes:
    """keccak256(abi.encodePacked(token0, token1)); tokens must already be sorted."""
    return Web3.keccak(encode_packed(["address", "address"], [token0, token1]))


def create2_preimage(factory: str, salt: bytes) -> bytes:
    """Explicit 85-byte CREATE2 preimage: 0xff | factory(20) | salt(32) | init hash(32)."""
    factory_bytes = _address_bytes(Web3.to_checksum_address(factory))
    if len(salt) != 32:
        raise ValueError(f"salt must be 32 bytes, got {len(salt)}")
    return CREATE2_PREFIX + factory_bytes + bytes(salt) + _INIT_CODE_HASH_BYTES


def derive_pool_address(factory: str, token_a: str, token_b: str) -> str:
    """Compute the pair address for (token_a, token_b) under factory. No RPC."""
    key = pair_key(token_a, token_b)
    salt = pair_salt(key.token0, key.token1)
    digest = Web3.keccak(create2_preimage(factory, salt))
    pair = Web3.to_checksum_address(digest[12:])
    log.debug("[PAIR] %r @ %s -> %s", key, factory, pair)
    return pair


# Uniswap V2 Pair ABI (minimal)
V2_PAIR_ABI_MINIMAL = [
    {"inputs": [], "name": "getReserves", "outputs": [
        {"type": "uint112", "name": "reserve0"},
        {"type": "uint112", "name": "reserve1"},
        {"type": "uint32", "name": "blockTimestampLast"},
    ], "stateMutability": "view", "type": "function"},
]
