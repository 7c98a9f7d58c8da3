"""Cliente do servidor de autorização OAuth2."""

from app.infra.oauth.token_client import (
    CLIENT_CREDENTIALS_GRANT,
    OAuthTokenClient,
    parse_token_response,
)

__all__ = ["CLIENT_CREDENTIALS_GRANT", "OAuthTokenClient", "parse_token_response"]
