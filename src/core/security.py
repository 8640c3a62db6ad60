from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
import structlog

from ..exceptions import AuthenticationError


@dataclass(frozen=True)
class TokenClaims:
    username: str
    expires_at: datetime


class TokenService:
    """Issues and verifies HMAC-signed bearer tokens.

    Verification is stateless: a token is valid while its signature matches the
    shared secret and its ``exp`` claim lies in the future. Rotating the secret
    invalidates every outstanding token.
    """

    def __init__(self, secret: str, expires_in: timedelta, algorithm: str = "HS256", logger=None):
        if not algorithm.startswith("HS"):
            raise ValueError(f"Unsupported signing algorithm: {algorithm}")
        self.secret = secret
        self.expires_in = expires_in
        self.algorithm = algorithm
        self.logger = logger or structlog.get_logger(__name__)

    def issue(self, username: str, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "username": username,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            self.logger.info("Rejected expired token")
            raise AuthenticationError("token expired") from e
        except jwt.InvalidTokenError as e:
            self.logger.info("Rejected invalid token", error=str(e))
            raise AuthenticationError("invalid token") from e

        username = payload.get("username")
        if not isinstance(username, str) or not username:
            raise AuthenticationError("token has no username claim")

        return TokenClaims(
            username=username,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        )


def issue_token(username: str, secret: str, ttl: timedelta) -> str:
    return TokenService(secret, ttl).issue(username)


def verify_token(token: str, secret: str) -> TokenClaims:
    # ttl only matters when issuing
    return TokenService(secret, timedelta(0)).verify(token)
