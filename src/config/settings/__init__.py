"""Agregador de settings do gateway de clientes.

Re-exporta todas as settings e funções de cada módulo.
Organização por integração para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Upstream de clientes
from config.settings.customer_api import (
    CUSTOMER_API_BASE_URL,
    CUSTOMER_INFO_PATH,
    CustomerApiSettings,
    get_customer_api_settings,
)

# Servidor de autorização
from config.settings.oauth import (
    DEFAULT_OAUTH_SCOPE,
    OAuthSettings,
    get_oauth_settings,
)

__all__ = [
    # Constants
    "CUSTOMER_API_BASE_URL",
    "CUSTOMER_INFO_PATH",
    "DEFAULT_OAUTH_SCOPE",
    # Base
    "BaseSettings",
    "CustomerApiSettings",
    "Environment",
    "OAuthSettings",
    "get_base_settings",
    "get_customer_api_settings",
    "get_oauth_settings",
]
