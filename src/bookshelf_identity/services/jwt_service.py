"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from bookshelf_identity.exceptions import InvalidTokenError, TokenExpiredError
from bookshelf_identity.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Tokens are stateless: they carry the user id as subject and an expiry,
    signed with a shared secret. There is no revocation list, so a token
    stays valid until it expires even after the client discards it.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(user_id)
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until a token expires (default 24)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    @property
    def expires_in_seconds(self) -> int:
        return int(self._access_expire.total_seconds())

    def create_access_token(
        self,
        user_id: UUID,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token for ``user_id``.

        Parameters
        ----------
        user_id
            The user's unique identifier
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._access_expire)

        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        TokenExpiredError
            If the signature is valid but the token is past its expiry
        InvalidTokenError
            If the token is malformed or signed with another secret
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp"]},
            )

            user_id = UUID(payload["sub"])
            exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
            issued_at = datetime.fromtimestamp(
                payload.get("iat", payload["exp"]),
                tz=timezone.utc,
            )

            return TokenPayload(user_id=user_id, issued_at=issued_at, exp=exp)

        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
