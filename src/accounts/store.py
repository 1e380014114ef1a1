"""Plaintext credential file: one ``username|password`` pair per line."""

import re
from pathlib import Path

import structlog

logger = structlog.get_logger()

DELIMITER = "|"

# Usernames become part of journal file names
_UNSAFE_USERNAME = re.compile(r"[\\/:*?\"<>\x00-\x1f]")


class UserExistsError(ValueError):
    """Username is already registered."""


class UnknownUserError(LookupError):
    """Username is not registered."""


class NoAccountsError(FileNotFoundError):
    """No credential file exists yet."""


class UserStore:
    """Register and authenticate journal users.

    Credentials are stored unencrypted; the file only namespaces journals.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def _read_pairs(self) -> list[tuple[str, str]]:
        if not self.path.exists():
            return []
        pairs = []
        with open(self.path, encoding="utf-8", errors="replace") as f:
            for line in f:
                parts = line.rstrip("\r\n").split(DELIMITER)
                if len(parts) != 2:
                    continue
                pairs.append((parts[0], parts[1]))
        return pairs

    def exists(self, username: str) -> bool:
        return any(name == username for name, _ in self._read_pairs())

    def register(self, username: str, password: str) -> None:
        """Append a new user.

        Raises:
            ValueError: If username or password is blank or contains '|',
                or username holds a path separator or control character
            UserExistsError: If username is taken
        """
        username = (username or "").strip()
        if not username or not password or not password.strip():
            raise ValueError("Username and password cannot be empty")
        if DELIMITER in username or DELIMITER in password:
            raise ValueError(f"Username and password cannot contain '{DELIMITER}'")
        if _UNSAFE_USERNAME.search(username):
            raise ValueError('Username cannot contain \\ / : * ? " < > or control characters')
        if self.exists(username):
            raise UserExistsError(f"User '{username}' already exists")

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(f"{username}{DELIMITER}{password}\n")
        logger.info("user_registered", user=username)

    def authenticate(self, username: str, password: str) -> bool:
        """Check a password. False means the user exists but the password is wrong.

        Raises:
            NoAccountsError: If nobody has registered yet
            UnknownUserError: If username is not registered
        """
        if not self.path.exists():
            raise NoAccountsError(f"No accounts found at {self.path}")

        for name, stored in self._read_pairs():
            if name == username:
                ok = stored == password
                if not ok:
                    logger.info("login_failed", user=username)
                return ok

        raise UnknownUserError(f"User '{username}' does not exist")
