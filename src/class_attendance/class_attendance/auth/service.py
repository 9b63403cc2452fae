from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: check the single administrator credential pair.

    Only a password hash is kept in memory. Basic Auth sends the password on
    every request, so after the first successful (slow) hash check the
    password is remembered as an HMAC under a per-process random key and
    later requests are matched against that.
    """

    def __init__(self, username: str, password_hash: str):
        self._username = username
        self._password_hash = password_hash
        self._mac_key = secrets.token_bytes(32)
        self._verified_mac: Optional[bytes] = None

    @classmethod
    def from_plaintext(cls, username: str, password: str) -> "AuthService":
        return cls(username, generate_password_hash(password))

    def _mac(self, password: str) -> bytes:
        return hmac.new(self._mac_key, password.encode("utf-8"), hashlib.sha256).digest()

    def _password_ok(self, password: str) -> bool:
        mac = self._mac(password)
        if self._verified_mac is not None and hmac.compare_digest(mac, self._verified_mac):
            return True
        if not check_password_hash(self._password_hash, password):
            return False
        self._verified_mac = mac
        return True

    def authenticate(self, username: Optional[str], password: Optional[str]) -> str:
        if username is None or password is None:
            raise AuthenticationError("Authentication required")

        user_ok = hmac.compare_digest(username.encode("utf-8"), self._username.encode("utf-8"))
        # password is checked whatever the username, no early return
        password_ok = self._password_ok(password)
        if not (user_ok and password_ok):
            logger.warning("rejected credentials for user %r", username)
            raise AuthenticationError("Invalid credentials")

        return username
