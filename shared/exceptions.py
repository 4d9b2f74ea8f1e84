#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions personnalisées - Gestion d'erreur spécifique

Hiérarchie d'exceptions utilisée par les constantes et la configuration.
Une recherche de symbole inconnu renvoie None; seules les variantes
strictes lèvent UnknownSymbolError.
"""

import logging
from typing import Dict, Any, Optional
from enum import Enum

logger = logging.getLogger(__name__)


class ErrorCode(Enum):
    """Codes d'erreur standardisés"""
    # Erreurs de configuration
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_MISSING = "CONFIG_MISSING"

    # Erreurs de données
    DATA_INVALID = "DATA_INVALID"
    DATA_NOT_FOUND = "DATA_NOT_FOUND"

    # Erreurs de symboles
    SYMBOL_NOT_SUPPORTED = "SYMBOL_NOT_SUPPORTED"


class CryptoTrackerException(Exception):
    """Exception de base pour l'application"""

    def __init__(
        self,
        message: str,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        logger.warning(f"Exception: {error_code.value if error_code else 'UNKNOWN'} - {message}",
                       extra={'details': details, 'cause': str(cause) if cause else None})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "code": self.error_code.value if self.error_code else None,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(CryptoTrackerException):
    """Erreur de configuration"""
    def __init__(self, message: str, config_key: str = None, **kwargs):
        super().__init__(message, ErrorCode.CONFIG_INVALID, {'config_key': config_key}, **kwargs)


class DataException(CryptoTrackerException):
    """Erreur de données"""
    def __init__(self, message: str, data_source: str = None,
                 error_code: ErrorCode = ErrorCode.DATA_INVALID, **kwargs):
        super().__init__(message, error_code, {'data_source': data_source}, **kwargs)


class DataNotFoundException(DataException):
    """Données non trouvées"""
    def __init__(self, resource: str, identifier: str = None,
                 error_code: ErrorCode = ErrorCode.DATA_NOT_FOUND, **kwargs):
        message = f"{resource} not found"
        if identifier:
            message += f": {identifier}"
        super().__init__(message, error_code=error_code, **kwargs)


class UnknownSymbolError(DataNotFoundException):
    """Symbole absent de la table des métadonnées"""
    def __init__(self, symbol: str, **kwargs):
        self.symbol = symbol
        super().__init__("Crypto symbol", symbol, data_source="CRYPTO_INFO",
                         error_code=ErrorCode.SYMBOL_NOT_SUPPORTED, **kwargs)
        self.details['symbol'] = symbol
