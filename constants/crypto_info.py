"""
Crypto metadata table: ticker symbol -> display name, image, circulating supply.

Entries are hand-curated. The table is validated once at import and exposed
read-only; unknown symbols yield None, never a default record.
"""
from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from shared.exceptions import ConfigurationError, UnknownSymbolError
from .api_constants import DEFAULT_DISPLAY_COUNT

log = logging.getLogger(__name__)

DEFAULT_QUOTE_ASSET = "USDT"


class CryptoInfo(BaseModel):
    """Display metadata for a single coin."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Readable coin name")
    image: str = Field(..., min_length=1, description="Icon URL")
    circulating_supply: int = Field(
        ..., ge=0, serialization_alias="circulatingSupply",
        description="Units in public circulation",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("image")
    @classmethod
    def validate_image(cls, v: str) -> str:
        if not v.startswith(("https://", "http://")):
            raise ValueError("image must be an http(s) URL")
        return v


# Ordered: this is the dashboard display order
_RAW_CRYPTO_INFO: List[Dict[str, Any]] = [
    {
        "symbol": "BTC",
        "name": "Bitcoin",
        "image": "https://assets.coingecko.com/coins/images/1/large/bitcoin.png",
        "circulating_supply": 19600000,
    },
    {
        "symbol": "ETH",
        "name": "Ethereum",
        "image": "https://assets.coingecko.com/coins/images/279/large/ethereum.png",
        "circulating_supply": 120000000,
    },
    {
        "symbol": "BNB",
        "name": "Binance Coin",
        "image": "https://assets.coingecko.com/coins/images/825/large/bnb-icon2_2x.png",
        "circulating_supply": 153856150,
    },
    {
        "symbol": "SOL",
        "name": "Solana",
        "image": "https://assets.coingecko.com/coins/images/4128/large/solana.png",
        "circulating_supply": 424666137,
    },
    {
        "symbol": "XRP",
        "name": "XRP",
        "image": "https://assets.coingecko.com/coins/images/44/large/xrp-symbol-white-128.png",
        "circulating_supply": 45404028640,
    },
    {
        "symbol": "ADA",
        "name": "Cardano",
        "image": "https://assets.coingecko.com/coins/images/975/large/cardano.png",
        "circulating_supply": 35045020830,
    },
    {
        "symbol": "DOGE",
        "name": "Dogecoin",
        "image": "https://assets.coingecko.com/coins/images/5/large/dogecoin.png",
        "circulating_supply": 143161976384,
    },
    {
        "symbol": "DOT",
        "name": "Polkadot",
        "image": "https://assets.coingecko.com/coins/images/12171/large/polkadot.png",
        "circulating_supply": 1274258350,
    },
    {
        "symbol": "MATIC",
        "name": "Polygon",
        "image": "https://assets.coingecko.com/coins/images/4713/large/matic-token-icon.png",
        "circulating_supply": 9319469069,
    },
    {
        "symbol": "AVAX",
        "name": "Avalanche",
        "image": "https://assets.coingecko.com/coins/images/12559/large/Avalanche_Circle_RedWhite_Trans.png",
        "circulating_supply": 363532436,
    },
    {
        "symbol": "LINK",
        "name": "Chainlink",
        "image": "https://assets.coingecko.com/coins/images/877/large/chainlink-new-logo.png",
        "circulating_supply": 556849971,
    },
    {
        "symbol": "UNI",
        "name": "Uniswap",
        "image": "https://assets.coingecko.com/coins/images/12504/large/uniswap-uni.png",
        "circulating_supply": 753766667,
    },
    {
        "symbol": "ATOM",
        "name": "Cosmos",
        "image": "https://assets.coingecko.com/coins/images/1481/large/cosmos_hub.png",
        "circulating_supply": 382335221,
    },
    {
        "symbol": "LTC",
        "name": "Litecoin",
        "image": "https://assets.coingecko.com/coins/images/2/large/litecoin.png",
        "circulating_supply": 73638701,
    },
    {
        "symbol": "TRX",
        "name": "TRON",
        "image": "https://assets.coingecko.com/coins/images/1094/large/tron-logo.png",
        "circulating_supply": 88735727668,
    },
]


def _is_valid_symbol(symbol: Any) -> bool:
    return isinstance(symbol, str) and symbol.isalnum() and symbol == symbol.upper()


def build_crypto_table(entries: Iterable[Mapping[str, Any]]) -> Mapping[str, CryptoInfo]:
    """
    Valide les entrées brutes et construit la table en lecture seule.

    Args:
        entries: Dicts avec les clés symbol, name, image, circulating_supply

    Returns:
        Mapping immuable symbol -> CryptoInfo, ordre d'origine conservé

    Raises:
        ConfigurationError: symbole vide, non majuscule, dupliqué, ou record invalide
    """
    table: Dict[str, CryptoInfo] = {}
    for entry in entries:
        record = dict(entry)
        symbol = record.pop("symbol", None)
        if not _is_valid_symbol(symbol):
            raise ConfigurationError(f"Invalid crypto symbol: {symbol!r}", config_key="symbol")
        if symbol in table:
            raise ConfigurationError(f"Duplicate crypto symbol: {symbol}", config_key=symbol)
        try:
            table[symbol] = CryptoInfo(**record)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid metadata for {symbol}: {e}", config_key=symbol, cause=e) from e
    return MappingProxyType(table)


CRYPTO_INFO: Mapping[str, CryptoInfo] = build_crypto_table(_RAW_CRYPTO_INFO)


def get_crypto_info(symbol: str) -> Optional[CryptoInfo]:
    """Exact-match lookup. Returns None for unknown symbols."""
    info = CRYPTO_INFO.get(symbol)
    if info is None:
        log.debug("Unknown crypto symbol requested", extra={"symbol": symbol})
    return info


def require_crypto_info(symbol: str) -> CryptoInfo:
    """Same as get_crypto_info but raises UnknownSymbolError when absent."""
    info = CRYPTO_INFO.get(symbol)
    if info is None:
        raise UnknownSymbolError(symbol)
    return info


def is_known_symbol(symbol: str) -> bool:
    return symbol in CRYPTO_INFO


def list_symbols() -> List[str]:
    return list(CRYPTO_INFO.keys())


def get_default_display_symbols(count: int = DEFAULT_DISPLAY_COUNT) -> List[str]:
    """
    Symboles affichés par défaut sur le dashboard.

    Args:
        count: Nombre de symboles (>= 0); au-delà de la taille de la table,
            la table entière est retournée
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return list_symbols()[:count]


def to_display_dict(info: CryptoInfo) -> Dict[str, Any]:
    """Serialize for the UI layer (camelCase keys)."""
    return info.model_dump(by_alias=True)


def estimate_market_cap(symbol: str, price: float) -> Optional[float]:
    """
    Capitalisation estimée = prix * offre en circulation.

    Returns:
        None si le symbole est inconnu

    Raises:
        ValueError: prix négatif, NaN ou infini
    """
    if not math.isfinite(price) or price < 0:
        raise ValueError(f"price must be a finite value >= 0, got {price}")
    info = get_crypto_info(symbol)
    if info is None:
        return None
    return float(price) * info.circulating_supply


def _check_quote(quote: str) -> None:
    if not quote:
        raise ValueError("quote asset must not be empty")


def to_binance_pair(symbol: str, quote: str = DEFAULT_QUOTE_ASSET) -> str:
    """BTC -> BTCUSDT"""
    _check_quote(quote)
    return f"{symbol}{quote}"


def from_binance_pair(pair: str, quote: str = DEFAULT_QUOTE_ASSET) -> Optional[str]:
    """BTCUSDT -> BTC; None if the quote does not match or the base is unknown."""
    _check_quote(quote)
    if not pair or not pair.endswith(quote) or len(pair) == len(quote):
        return None
    base = pair[:len(pair) - len(quote)]
    return base if base in CRYPTO_INFO else None
