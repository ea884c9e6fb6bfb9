"""
EVM constants shared by the pricing modules. Plain values only, no env or I/O.
"""

ZERO_ADDRESS: str = "0x0000000000000000000000000000000000000000"
MAX_UINT256: int = 2**256 - 1
CREATE2_PREFIX: bytes = b"\xff"
