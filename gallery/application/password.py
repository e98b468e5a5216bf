import hmac

import structlog

from ..domain.exceptions import InvalidPasswordError

logger = structlog.get_logger()


class PasswordGuard:
    """Checks the shared gallery password on write operations."""

    def __init__(self, expected: str) -> None:
        self._expected = expected

    def verify(self, supplied: str) -> None:
        """
        Raise unless the supplied password matches.

        An empty configured password matches nothing.

        Raises:
            InvalidPasswordError: On mismatch
        """
        if not self._expected or not hmac.compare_digest(
            supplied.encode("utf-8"), self._expected.encode("utf-8")
        ):
            logger.warning("Password rejected")
            raise InvalidPasswordError()
