"""
Error taxonomy for pair derivation and quoting.

Every error is a local validation failure and is never retried inside the
library. Messages lead with the matching on-chain revert reason so an
off-chain failure can be lined up with the revert it predicts.
"""


class PairQuoteError(Exception):
    """Base class for all pairquote errors."""

    reason = "UniswapV2Library"

    def __init__(self, detail: str = ""):
        msg = f"{self.reason}: {detail}" if detail else self.reason
        super().__init__(msg)
        self.detail = detail


class IdenticalTokensError(PairQuoteError):
    reason = "UniswapV2Library: IDENTICAL_ADDRESSES"


class ZeroAddressError(PairQuoteError):
    reason = "UniswapV2Library: ZERO_ADDRESS"


class InsufficientAmountError(PairQuoteError):
    reason = "UniswapV2Library: INSUFFICIENT_AMOUNT"


class InsufficientInputAmountError(InsufficientAmountError):
    reason = "UniswapV2Library: INSUFFICIENT_INPUT_AMOUNT"


class InsufficientOutputAmountError(InsufficientAmountError):
    reason = "UniswapV2Library: INSUFFICIENT_OUTPUT_AMOUNT"


class InsufficientLiquidityError(PairQuoteError):
    reason = "UniswapV2Library: INSUFFICIENT_LIQUIDITY"


class InvalidPathError(PairQuoteError):
    reason = "UniswapV2Library: INVALID_PATH"


class ArithmeticOverflowError(PairQuoteError):
    """A value left the uint256 range. Signals a caller bug, not bad liquidity."""

    reason = "uint256 overflow"
