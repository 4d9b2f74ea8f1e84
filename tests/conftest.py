"""
Configuration globale pytest pour tous les tests.

Ajoute le répertoire racine du projet au PYTHONPATH
pour permettre les imports (ex: from constants import ...)
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

# Ajouter le répertoire racine du projet au sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def clean_env(monkeypatch):
    """Retire les variables d'environnement lues par les settings."""
    for name in (
        "ENVIRONMENT", "DEBUG",
        "LOG_LEVEL", "LOG_FORMAT", "LOG_FILE_PATH", "LOG_MAX_SIZE_MB", "LOG_BACKUP_COUNT",
        "MARKET_BASE_URL", "MARKET_QUOTE_ASSET", "MARKET_DISPLAY_COUNT",
    ):
        monkeypatch.delenv(name, raising=False)
    # Pas de .env local pendant les tests
    monkeypatch.chdir(Path(__file__).parent)
    return monkeypatch


@pytest.fixture
def raw_entries() -> List[Dict[str, Any]]:
    """Entrées brutes valides pour build_crypto_table."""
    return [
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
    ]


@pytest.fixture
def restore_root_logger():
    """Restaure les handlers du logger racine après configure_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
