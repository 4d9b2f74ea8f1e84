#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration Settings - Centralisation avec Pydantic

Ce module centralise la configuration runtime de l'application avec:
- Validation des types avec Pydantic
- Variables d'environnement (.env supporté)
- Configuration par environnement (dev/prod)

Les constantes du package ``constants`` ne sont jamais modifiées ici:
elles servent uniquement de valeurs par défaut. MarketDataConfig est lue par
get_display_symbols, get_display_pairs et build_market_url.
"""

from typing import List, Optional
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from constants import (
    BINANCE_API_URL,
    CRYPTO_INFO,
    DEFAULT_DISPLAY_COUNT,
    DEFAULT_QUOTE_ASSET,
    build_api_url,
    get_default_display_symbols,
    to_binance_pair,
)


class LoggingConfig(BaseSettings):
    """Configuration logging"""
    log_level: str = Field(default="INFO", description="Niveau log")
    log_format: str = Field(default="json", description="Format log fichier (json/text)")
    log_file_path: Optional[Path] = Field(None, description="Chemin fichier log")
    log_max_size_mb: int = Field(default=100, ge=1, description="Taille max log MB")
    log_backup_count: int = Field(default=5, ge=0, description="Nombre backups log")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'Log level doit être: {", ".join(valid_levels)}')
        return v.upper()

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v):
        if v.lower() not in ['json', 'text']:
            raise ValueError('Log format doit être: json ou text')
        return v.lower()

    model_config = {
        # Les champs portent déjà le préfixe log_ (LOG_LEVEL, LOG_FILE_PATH...)
        'env_prefix': ''
    }


class MarketDataConfig(BaseSettings):
    """Configuration source de données marché"""
    base_url: str = Field(default=BINANCE_API_URL, description="URL API marché")
    quote_asset: str = Field(default=DEFAULT_QUOTE_ASSET, description="Actif de cotation")
    display_count: int = Field(
        default=DEFAULT_DISPLAY_COUNT, ge=1, le=len(CRYPTO_INFO),
        description="Nombre de cryptos affichées",
    )

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v):
        if not v.startswith(('https://', 'http://')):
            raise ValueError('base_url doit être une URL http(s)')
        return v.rstrip('/')

    @field_validator('quote_asset')
    @classmethod
    def validate_quote_asset(cls, v):
        v = v.strip().upper()
        if not v.isalnum():
            raise ValueError('quote_asset invalide')
        return v

    model_config = {
        'env_prefix': 'MARKET_'
    }


class Settings(BaseSettings):
    """Configuration principale de l'application"""

    # Environnement
    environment: str = Field(default="development", description="Environnement")
    debug: bool = Field(default=False, description="Mode debug")

    # Sous-configurations
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    market: MarketDataConfig = Field(default_factory=MarketDataConfig)

    @field_validator('environment')
    @classmethod
    def validate_environment(cls, v):
        valid_envs = ['development', 'staging', 'production']
        if v not in valid_envs:
            raise ValueError(f'Environment doit être: {", ".join(valid_envs)}')
        return v

    def model_post_init(self, __context):
        """Validation post-initialisation"""
        if self.environment == 'production' and self.debug:
            raise ValueError('Debug ne peut pas être activé en production')

    def is_production(self) -> bool:
        return self.environment == 'production'

    def is_debug_enabled(self) -> bool:
        """Vérifier si le debug est activé"""
        return self.debug and not self.is_production()

    model_config = {
        'env_file': '.env',
        'env_file_encoding': 'utf-8',
        'case_sensitive': False,
        'populate_by_name': True,
        'extra': 'ignore'
    }


# Instance globale des settings
settings = Settings()


def get_settings() -> Settings:
    """Obtenir l'instance de configuration"""
    return settings


def get_logging_config() -> LoggingConfig:
    return settings.logging


def get_market_data_config() -> MarketDataConfig:
    return settings.market


def get_display_symbols(config: Optional[MarketDataConfig] = None) -> List[str]:
    """Symboles du dashboard selon display_count (défaut: settings globaux)."""
    config = config or get_market_data_config()
    return get_default_display_symbols(config.display_count)


def get_display_pairs(config: Optional[MarketDataConfig] = None) -> List[str]:
    """Paires Binance des symboles affichés, cotées dans quote_asset."""
    config = config or get_market_data_config()
    return [to_binance_pair(symbol, config.quote_asset) for symbol in get_display_symbols(config)]


def build_market_url(path: str, config: Optional[MarketDataConfig] = None) -> str:
    """URL d'un endpoint marché sur base_url."""
    config = config or get_market_data_config()
    return build_api_url(path, config.base_url)


if __name__ == "__main__":
    config = Settings()
    print("[OK] Configuration validée avec succès")
    print(f"Environment: {config.environment}")
    print(f"Debug: {config.is_debug_enabled()}")
    print(f"Market API: {config.market.base_url} ({config.market.quote_asset})")
    print(f"Log level: {config.logging.log_level}")
