import pytest

from pairquote.config import ZERO_ADDRESS
from pairquote.errors import IdenticalTokensError, ZeroAddressError
from pairquote.pricing.keys import (
    PairKey,
    canonicalize,
    create2_preimage,
    derive_pool_address,
    pair_key,
    pair_salt,
)

from conftest import FACTORY, TOKEN_A, TOKEN_B

WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"


def test_canonicalize_orders_by_address_value():
    assert canonicalize(TOKEN_B, TOKEN_A) == (TOKEN_A, TOKEN_B)
    assert canonicalize(TOKEN_A, TOKEN_B) == (TOKEN_A, TOKEN_B)


def test_canonicalize_is_order_independent():
    for a, b in [(WETH, USDC), (DAI, WETH), (USDC, DAI), (TOKEN_A, WETH)]:
        assert canonicalize(a, b) == canonicalize(b, a)


def test_canonicalize_ignores_case():
    assert canonicalize(USDC.lower(), WETH.lower()) == (USDC, WETH)


def test_canonicalize_identical_tokens():
    with pytest.raises(IdenticalTokensError):
        canonicalize(WETH, WETH)
    # same token, different spelling
    with pytest.raises(IdenticalTokensError):
        canonicalize(WETH, WETH.lower())


def test_canonicalize_zero_address():
    with pytest.raises(ZeroAddressError):
        canonicalize(ZERO_ADDRESS, WETH)
    with pytest.raises(ZeroAddressError):
        canonicalize(WETH, ZERO_ADDRESS)


def test_identical_zero_addresses_report_identical_first():
    with pytest.raises(IdenticalTokensError):
        canonicalize(ZERO_ADDRESS, ZERO_ADDRESS)


def test_pair_key():
    key = pair_key(WETH, USDC)
    assert key == PairKey(USDC, WETH)
    assert key.canonical == f"{USDC.lower()}:{WETH.lower()}"
    assert pair_key(USDC, WETH) == key


def test_derive_known_mainnet_pairs():
    assert derive_pool_address(FACTORY, WETH, USDC) == "0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc"
    assert derive_pool_address(FACTORY, DAI, WETH) == "0xA478c2975Ab1Ea89e8196811F51A7B7Ade33eB11"


def test_derive_is_order_independent_and_reproducible():
    first = derive_pool_address(FACTORY, TOKEN_A, TOKEN_B)
    assert derive_pool_address(FACTORY, TOKEN_B, TOKEN_A) == first
    assert derive_pool_address(FACTORY.lower(), TOKEN_A, TOKEN_B) == first


def test_derive_depends_on_factory():
    other = "0x8909Dc15e40173Ff4699343b6eB8132c65e18eC6"
    assert derive_pool_address(other, WETH, USDC) != derive_pool_address(FACTORY, WETH, USDC)


def test_derive_propagates_canonicalization_errors():
    with pytest.raises(IdenticalTokensError):
        derive_pool_address(FACTORY, DAI, DAI)
    with pytest.raises(ZeroAddressError):
        derive_pool_address(FACTORY, ZERO_ADDRESS, DAI)


def test_create2_preimage_layout():
    salt = pair_salt(TOKEN_A, TOKEN_B)
    assert len(salt) == 32
    preimage = create2_preimage(FACTORY, salt)
    assert len(preimage) == 85
    assert preimage[:1] == b"\xff"
    assert preimage[1:21] == bytes.fromhex(FACTORY[2:])
    assert preimage[21:53] == bytes(salt)


def test_create2_preimage_rejects_short_salt():
    with pytest.raises(ValueError):
        create2_preimage(FACTORY, b"\x00" * 31)


def test_wrong_init_code_hash_moves_every_pair(monkeypatch):
    expected = derive_pool_address(FACTORY, WETH, USDC)
    monkeypatch.setattr("pairquote.pricing.keys._INIT_CODE_HASH_BYTES", bytes(32))

    assert derive_pool_address(FACTORY, WETH, USDC) != expected
    assert derive_pool_address(FACTORY, USDC, WETH) == derive_pool_address(FACTORY, WETH, USDC)
    assert create2_preimage(FACTORY, pair_salt(USDC, WETH))[53:] == bytes(32)


def test_pair_key_repr():
    assert repr(pair_key(WETH, USDC)) == f"Pair({USDC[:10]}.../{WETH[:10]}...)"
