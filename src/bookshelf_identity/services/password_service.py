"""Password hashing service using bcrypt.

Provides secure password hashing and verification with a fixed
work factor and basic length validation.
"""

import bcrypt

from bookshelf_identity.exceptions import WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.
    Also enforces the length limits bcrypt can actually handle.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("My_secure_passw0rd")
    >>> service.verify("My_secure_passw0rd", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    DEFAULT_ROUNDS = 12

    # Password requirements (bcrypt only looks at the first 72 bytes)
    MIN_LENGTH = 8
    MAX_BYTES = 72

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Production code
            uses the default of 12; tests may pass a lower value.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise (including for a
        malformed hash)
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError, AttributeError):
            # Invalid hash format or oversized input
            return False

    def validate_strength(self, password: str) -> None:
        """Validate that a password can be hashed safely.

        Character-class rules are enforced by the request schemas; this
        check only guards what bcrypt itself requires.

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a password hash needs to be rehashed.

        After changing the rounds setting, existing hashes can be
        identified for rehashing on next login.
        """
        try:
            # bcrypt format: $2b$XX$...
            parts = password_hash.split("$")
            if len(parts) >= 3:
                current_rounds = int(parts[2])
                return current_rounds != self._rounds
        except (ValueError, IndexError):
            pass
        return True
