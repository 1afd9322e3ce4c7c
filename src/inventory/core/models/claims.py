from pydantic import BaseModel


class TokenClaims(BaseModel):
    """Canonical representation of bearer-token claims used across the app."""

    iss: str
    sub: str
    aud: str | list[str] | None = None
    exp: int | None = None
    nbf: int | None = None
    iat: int | None = None
    email: str | None = None
    name: str | None = None
    scope: str | None = None
    roles: list[str] | None = None

    def scopes(self) -> set[str]:
        return set(self.scope.split()) if self.scope else set()


class CurrentUser(BaseModel):
    """Identity returned by ``GET /api/user``."""

    id: str
    email: str | None = None
    name: str | None = None
    issuer: str
    scopes: list[str] = []
    roles: list[str] = []

    @classmethod
    def from_claims(cls, claims: TokenClaims) -> "CurrentUser":
        return cls(
            id=claims.sub,
            email=claims.email,
            name=claims.name,
            issuer=claims.iss,
            scopes=sorted(claims.scopes()),
            roles=list(claims.roles or []),
        )
