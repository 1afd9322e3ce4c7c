from .claims import CurrentUser, TokenClaims

__all__ = ["CurrentUser", "TokenClaims"]
