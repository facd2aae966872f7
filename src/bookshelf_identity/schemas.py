"""Identity schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The subject of the token
    issued_at
        When the token was signed
    exp
        Token expiration timestamp
    """

    user_id: UUID
    issued_at: datetime
    exp: datetime
