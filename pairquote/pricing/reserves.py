"""
Reserve resolution — read a pair's reserves and align them to the caller's token order.

The reserve source is any callable fetch_reserves(pair_address) -> (reserve0, reserve1, ...)
returning values in the pair's own token0/token1 order. Nothing is cached:
reserves move with every swap.
"""

import logging
from typing import Callable, Sequence, Tuple, Union

from web3 import Web3, HTTPProvider

from pairquote.config import RPC_URL
from pairquote.pricing.keys import V2_PAIR_ABI_MINIMAL, derive_pool_address, pair_key

log = logging.getLogger(__name__)

ReserveFetcher = Callable[[str], Sequence[int]]


def get_ordered_reserves(
    factory: str,
    token_a: str,
    token_b: str,
    fetch_reserves: ReserveFetcher,
) -> Tuple[int, int]:
    """Return (reserve_a, reserve_b) for the (token_a, token_b) pair under factory."""
    key = pair_key(token_a, token_b)
    pair = derive_pool_address(factory, token_a, token_b)
    result = fetch_reserves(pair)
    reserve0, reserve1 = result[0], result[1]

    if Web3.to_checksum_address(token_a) == key.token0:
        ordered = (reserve0, reserve1)
    else:
        ordered = (reserve1, reserve0)
    log.debug("[RESERVES] %s %s/%s -> %s", pair, token_a, token_b, ordered)
    return ordered


class Web3ReserveOracle:
    """fetch_reserves backed by getReserves() on a synchronous Web3 connection.

    Pin block_identifier to a block number to read every hop of a path at the
    same block. RPC errors propagate to the caller.
    """

    def __init__(self, w3: Web3, block_identifier: Union[str, int] = "latest"):
        self.w3 = w3
        self.block_identifier = block_identifier
        # Metrics
        self._calls = 0

    @classmethod
    def from_url(cls, url: str = "", block_identifier: Union[str, int] = "latest") -> "Web3ReserveOracle":
        """Build over HTTPProvider; falls back to RPC_URL from config."""
        url = url or RPC_URL
        if not url:
            raise ValueError("from_url: no url given and RPC_URL is not set")
        return cls(Web3(HTTPProvider(url)), block_identifier=block_identifier)

    def at_block(self, block_identifier: Union[str, int]) -> "Web3ReserveOracle":
        """Same connection, different block pin."""
        return Web3ReserveOracle(self.w3, block_identifier=block_identifier)

    def __call__(self, pair_address: str) -> Tuple[int, int]:
        pair = self.w3.eth.contract(
            address=Web3.to_checksum_address(pair_address),
            abi=V2_PAIR_ABI_MINIMAL,
        )
        reserve0, reserve1, _ts = pair.functions.getReserves().call(
            block_identifier=self.block_identifier
        )
        self._calls += 1
        return reserve0, reserve1

    @property
    def calls(self) -> int:
        return self._calls
