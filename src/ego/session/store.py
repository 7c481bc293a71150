"""
Single-slot persistence for the active session record.

The record is either absent or present. Writes go to a temp file in the
same directory and are moved into place with ``os.replace``, so a killed
process leaves either the old state or the new one, never a partial file.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from ego.errors import CorruptSessionRecord, SessionAlreadyActive
from ego.logger import get_logger
from ego.session.models import SessionRecord

logger = get_logger(__name__)


class SessionStore:
    """Reads and writes the one session record at a fixed path."""

    def __init__(self, path: Union[str, os.PathLike]):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Optional[SessionRecord]:
        """
        Load the persisted record.

        Returns:
            The record, or None when no session is active.

        Raises:
            CorruptSessionRecord: If the file exists but can not be parsed.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise CorruptSessionRecord(self.path, str(e.strerror or e))
        except UnicodeDecodeError:
            raise CorruptSessionRecord(self.path, "not valid UTF-8")

        try:
            return SessionRecord.model_validate_json(raw)
        except ValidationError as e:
            raise CorruptSessionRecord(self.path, f"{e.error_count()} validation error(s)")

    def save(self, record: SessionRecord) -> None:
        """
        Atomically write ``record``.

        Raises:
            SessionAlreadyActive: If a record already exists.
        """
        if self.exists():
            raise SessionAlreadyActive()

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(
            suffix=".tmp",
            prefix="session_",
            dir=self.path.parent,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(record.model_dump_json(indent=2))
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, self.path)
        except BaseException:
            # Clean up temp file on error
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise
        logger.debug(f"Saved session record to {self.path}")

    def clear(self) -> bool:
        """
        Delete the record. Returns True if one was present.

        Raises:
            CorruptSessionRecord: If something that is not a file occupies the path.
        """
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise CorruptSessionRecord(
                self.path,
                f"can not be removed: {e.strerror or e}",
                hint="Remove it by hand.",
            )
        logger.debug(f"Removed session record {self.path}")
        return True
