"""
In-memory password storage.

SECURITY NOTE:
Passwords are obfuscated with ObfuscationCodec before they are stored. This
is reversible and is NOT encryption. Plain text is only ever returned from
PasswordStore.get_password() and is never logged.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .codec import ObfuscationCodec

logger = logging.getLogger(__name__)


def normalize_service(service: str) -> str:
    """Reduce a service name to its lookup key: trimmed and lowercase."""
    return service.strip().lower()


@dataclass
class PasswordEntry:
    """Represents a stored password for one service."""
    service_key: str
    stored_password: str

    def __repr__(self) -> str:
        return f"PasswordEntry(service_key={self.service_key!r}, stored_password='***')"


class PasswordStore:
    """Holds obfuscated passwords keyed by normalized service name."""

    def __init__(self, codec: Optional[ObfuscationCodec] = None):
        """
        Initialize the password store.

        Args:
            codec: Codec used to obfuscate stored passwords
        """
        self.codec = codec or ObfuscationCodec()
        self._entries: Dict[str, PasswordEntry] = {}

    def add_password(self, service: str, password: str) -> None:
        """
        Store a password, replacing any existing one for the same service.

        Args:
            service: Service name; case and surrounding whitespace are ignored
            password: Plain text password
        """
        key = normalize_service(service)
        if key in self._entries:
            logger.info(f"Replacing password for service '{key}'")
        else:
            logger.info(f"Storing password for service '{key}'")
        self._entries[key] = PasswordEntry(
            service_key=key,
            stored_password=self.codec.encode(password),
        )

    def get_password(self, service: str) -> Optional[str]:
        """
        Retrieve the plain text password for a service.

        Returns:
            The password, or None if no password is stored for the service
        """
        entry = self._entries.get(normalize_service(service))
        if entry is None:
            return None
        return self.codec.decode(entry.stored_password)

    def delete_password(self, service: str) -> bool:
        """
        Delete the password for a service.

        Returns:
            True if a password was stored for the service, False otherwise
        """
        key = normalize_service(service)
        if self._entries.pop(key, None) is None:
            logger.debug(f"Delete requested for unknown service '{key}'")
            return False
        logger.info(f"Deleted password for service '{key}'")
        return True

    def __contains__(self, service: str) -> bool:
        return normalize_service(service) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
