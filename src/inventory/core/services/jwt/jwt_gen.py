import time
from typing import Any

from authlib.common.security import generate_token
from authlib.jose import JoseError, jwt
from fastapi import HTTPException
from loguru import logger

from src.inventory.runtime.config.config_data import ConfigData
from src.inventory.runtime.context import get_config

_REGISTERED_CLAIMS = {"iss", "sub", "aud", "exp", "iat", "nbf", "jti"}


class JwtGeneratorService:
    """Service for generating bearer tokens accepted by the identity endpoint."""

    def generate_jwt(
        self,
        subject: str,
        claims: dict[str, Any] | None = None,
        expires_in_seconds: int = 3600,
        issuer: str | None = None,
        audience: str | list[str] | None = None,
        algorithm: str = "HS256",
        secret: str | None = None,
    ) -> str:
        """Generate a signed JWT using authlib.

        Args:
            subject: Subject (sub) claim - typically user ID
            claims: Additional claims to include in the token
            expires_in_seconds: Token lifetime in seconds (default: 1 hour)
            issuer: Issuer (iss) claim (defaults to config issuer)
            audience: Audience (aud) claim (defaults to config audiences)
            algorithm: Signing algorithm (default: HS256)
            secret: Optional signing secret. If None, the configured session secret is used.

        Returns:
            Signed JWT token string

        Raises:
            HTTPException: If the secret is missing or the algorithm is not allowed
        """
        config: ConfigData = get_config()

        secret = secret or config.app.session_signing_secret
        if not secret:
            raise HTTPException(
                status_code=500, detail="JWT signing secret not configured"
            )

        if algorithm not in config.jwt.allowed_algorithms:
            logger.debug(
                f"Attempted to use disallowed algorithm: {algorithm}, only {config.jwt.allowed_algorithms} are allowed"
            )
            raise HTTPException(
                status_code=500, detail=f"Algorithm {algorithm} not allowed"
            )

        now = int(time.time())
        payload: dict[str, Any] = {
            "iss": issuer or config.jwt.gen_issuer,
            "sub": subject,
            "aud": audience or config.jwt.audiences,
            "exp": now + expires_in_seconds,
            "iat": now,
            "nbf": now,
            "jti": generate_token(16),
        }
        if claims:
            payload.update(
                {k: v for k, v in claims.items() if k not in _REGISTERED_CLAIMS}
            )

        try:
            token = jwt.encode({"alg": algorithm, "typ": "JWT"}, payload, secret)
        except JoseError as e:
            raise HTTPException(
                status_code=500, detail=f"JWT encoding failed: {str(e)}"
            ) from e

        return token.decode() if isinstance(token, bytes) else token

    def generate_access_token(
        self,
        user_id: str,
        email: str | None = None,
        name: str | None = None,
        scopes: list[str] | None = None,
        roles: list[str] | None = None,
        expires_in_seconds: int = 3600,
        **kwargs: Any,
    ) -> str:
        """Generate an access token carrying the caller's identity claims."""
        claims: dict[str, Any] = {}
        if email:
            claims["email"] = email
        if name:
            claims["name"] = name
        if scopes:
            claims["scope"] = " ".join(scopes)
        if roles:
            claims["roles"] = roles

        return self.generate_jwt(
            subject=user_id,
            claims=claims,
            expires_in_seconds=expires_in_seconds,
            **kwargs,
        )
