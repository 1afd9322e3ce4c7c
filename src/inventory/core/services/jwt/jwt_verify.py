"""JWT verification service."""

from authlib.jose import JoseError, jwt
from fastapi import HTTPException
from loguru import logger

from src.inventory.core.models.claims import TokenClaims
from src.inventory.runtime.context import get_config


class JwtVerificationService:
    """Verifies HS256 bearer tokens signed with the configured session secret."""

    def verify_jwt(self, token: str, *, key: str | None = None) -> TokenClaims:
        cfg = get_config()

        verification_key = key or cfg.app.session_signing_secret
        if not verification_key:
            raise HTTPException(status_code=500, detail="JWT signing secret not configured")

        claims_options = {
            "iss": {"essential": True, "values": [cfg.jwt.gen_issuer]},
            "sub": {"essential": True},
            "aud": {"essential": True, "values": cfg.jwt.audiences},
        }

        try:
            claims = jwt.decode(token, verification_key, claims_options=claims_options)
            if claims.header.get("alg") not in cfg.jwt.allowed_algorithms:
                raise HTTPException(status_code=401, detail="Disallowed JWT algorithm")
            claims.validate(leeway=cfg.jwt.clock_skew)
        except (JoseError, ValueError) as exc:
            logger.bind(error_type=type(exc).__name__).debug("Rejected bearer token")
            raise HTTPException(status_code=401, detail=f"JWT error: {exc}") from exc

        return TokenClaims.model_validate(dict(claims))
