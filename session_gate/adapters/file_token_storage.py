"""
File Token Storage - Client token kept in a small JSON file.
"""

import json
import os
from pathlib import Path
from typing import Optional, Union
from session_gate.ports.token_storage_port import TokenStoragePort


class FileTokenStorage(TokenStoragePort):
    """
    Durable client token storage.

    The file holds a single JSON object with one named key. It is written
    atomically (temp file + rename) and readable by the owner only.
    A missing or unreadable file means "logged out".
    """

    def __init__(self, path: Union[str, Path], key: str = "token"):
        """
        Initialize file token storage.

        Args:
            path: JSON file location (parent directories are created on save)
            key: Name of the key holding the token
        """
        self._path = Path(path).expanduser()
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[str]:
        """Read the token, or None if absent or unreadable."""
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError, OSError):
            return None

        if not isinstance(data, dict):
            return None

        token = data.get(self._key)
        if not isinstance(token, str) or not token:
            return None
        return token

    def save(self, token: str) -> None:
        """Write the token, replacing the file atomically."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")

        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({self._key: token}, f)
            os.replace(tmp_path, self._path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    def delete(self) -> bool:
        """Remove the token file."""
        try:
            self._path.unlink()
        except FileNotFoundError:
            return False
        return True
