import pytest

from pairquote.pricing.keys import canonicalize, derive_pool_address

# Ethereum mainnet Uniswap V2 factory
FACTORY = "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f"

TOKEN_A = "0x" + "11" * 20
TOKEN_B = "0x" + "22" * 20
TOKEN_C = "0x" + "33" * 20


class FakeReserves:
    """Reserve source keyed by derived pair address, records every read."""

    def __init__(self, factory: str = FACTORY):
        self.factory = factory
        self._pairs = {}
        self.reads = []

    def set(self, token_a: str, token_b: str, reserve_a: int, reserve_b: int):
        """Register reserves in (token_a, token_b) order; stored in token0 order."""
        token0, _ = canonicalize(token_a, token_b)
        pair = derive_pool_address(self.factory, token_a, token_b)
        if token0.lower() == token_a.lower():
            self._pairs[pair] = (reserve_a, reserve_b, 0)
        else:
            self._pairs[pair] = (reserve_b, reserve_a, 0)
        return pair

    def __call__(self, pair_address: str):
        self.reads.append(pair_address)
        return self._pairs[pair_address]


@pytest.fixture
def reserves():
    return FakeReserves()
