"""
Multi-hop path quoting — chain single-hop quotes along a token path.

amounts_out walks forward from an exact input; amounts_in walks backward from
an exact output. Reserves are fetched per hop with no snapshot across hops, so
a path is only as consistent as the reserve source. The first failing hop
aborts the whole path.
"""

import logging
from typing import List, Sequence, Tuple

from pairquote.config import UNISWAP_V2_FACTORY
from pairquote.errors import InvalidPathError
from pairquote.pricing.amounts import amount_in_for_exact_out, amount_out_for_exact_in
from pairquote.pricing.keys import derive_pool_address
from pairquote.pricing.reserves import ReserveFetcher, get_ordered_reserves

log = logging.getLogger(__name__)


def _check_path(path: Sequence[str]):
    if len(path) < 2:
        raise InvalidPathError(f"path length {len(path)} < 2")


def amounts_out(
    factory: str,
    amount_in: int,
    path: Sequence[str],
    fetch_reserves: ReserveFetcher,
) -> List[int]:
    """amounts[i] = amount of path[i] flowing through; amounts[0] == amount_in."""
    _check_path(path)
    amounts = [0] * len(path)
    amounts[0] = amount_in
    for i in range(len(path) - 1):
        reserve_in, reserve_out = get_ordered_reserves(factory, path[i], path[i + 1], fetch_reserves)
        amounts[i + 1] = amount_out_for_exact_in(amounts[i], reserve_in, reserve_out)
    log.debug("[PATH] out %d hops: %s", len(path) - 1, amounts)
    return amounts


def amounts_in(
    factory: str,
    amount_out: int,
    path: Sequence[str],
    fetch_reserves: ReserveFetcher,
) -> List[int]:
    """amounts[i] = amount of path[i] required; amounts[-1] == amount_out."""
    _check_path(path)
    amounts = [0] * len(path)
    amounts[-1] = amount_out
    for i in range(len(path) - 1, 0, -1):
        reserve_in, reserve_out = get_ordered_reserves(factory, path[i - 1], path[i], fetch_reserves)
        amounts[i - 1] = amount_in_for_exact_out(amounts[i], reserve_in, reserve_out)
    log.debug("[PATH] in %d hops: %s", len(path) - 1, amounts)
    return amounts


class RouteQuoter:
    """Binds a reserve source and a factory (default: the configured V2 factory)."""

    def __init__(self, fetch_reserves: ReserveFetcher, factory: str = UNISWAP_V2_FACTORY):
        self.factory = factory
        self.fetch_reserves = fetch_reserves
        # Metrics
        self._paths_quoted = 0
        self._hops_quoted = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def pair_for(self, token_a: str, token_b: str) -> str:
        return derive_pool_address(self.factory, token_a, token_b)

    def reserves(self, token_a: str, token_b: str) -> Tuple[int, int]:
        return get_ordered_reserves(self.factory, token_a, token_b, self.fetch_reserves)

    def amounts_out(self, amount_in: int, path: Sequence[str]) -> List[int]:
        result = amounts_out(self.factory, amount_in, path, self.fetch_reserves)
        self._record(path)
        return result

    def amounts_in(self, amount_out: int, path: Sequence[str]) -> List[int]:
        result = amounts_in(self.factory, amount_out, path, self.fetch_reserves)
        self._record(path)
        return result

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def _record(self, path: Sequence[str]):
        self._paths_quoted += 1
        self._hops_quoted += len(path) - 1

    @property
    def hops_quoted(self) -> int:
        return self._hops_quoted

    def summary(self) -> str:
        return (f"RouteQuoter: factory={self.factory[:10]}... "
                f"paths={self._paths_quoted} hops={self._hops_quoted}")
