"""
Session lifecycle: NoSession -> begin -> Active -> end | discard -> NoSession.

The manager owns no state of its own; the store is the single source of
truth, so each CLI invocation can build a fresh manager.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from ego.errors import (
    CorruptSessionRecord,
    InvalidPath,
    NoActiveSession,
    ProjectPathUnavailable,
    SessionAlreadyActive,
)
from ego.line_counter import ScanPolicy, ScanResult, resolve_root, scan_tree
from ego.logger import get_logger
from ego.session.models import SessionRecord, SessionSummary
from ego.session.store import SessionStore

logger = get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def diff_fingerprints(before: dict[str, str], after: dict[str, str]):
    """
    Compare two path -> digest maps.

    Returns:
        (created, modified, deleted) sorted path lists
    """
    created = sorted(after.keys() - before.keys())
    deleted = sorted(before.keys() - after.keys())
    modified = sorted(
        path for path in before.keys() & after.keys() if before[path] != after[path]
    )
    return created, modified, deleted


class SessionManager:
    """Starts and ends coding sessions against a SessionStore."""

    def __init__(
        self,
        store: SessionStore,
        policy: Optional[ScanPolicy] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.store = store
        self.policy = policy or ScanPolicy()
        self.clock = clock or _utc_now

    def status(self) -> Optional[SessionRecord]:
        """Return the active session record, if any."""
        return self.store.load()

    def begin_session(self, path) -> SessionRecord:
        """
        Measure ``path`` and persist a new session record.

        Raises:
            SessionAlreadyActive: If a session record already exists.
            InvalidPath: If path is not an existing, readable directory.
        """
        active = self.store.load()
        if active is not None:
            raise SessionAlreadyActive(active.project_path)

        root = resolve_root(path)
        scan = scan_tree(root, self.policy)
        project_path = str(root)

        record = SessionRecord(
            project_path=project_path,
            start_time=self.clock(),
            initial_line_count=scan.line_count,
            initial_char_count=scan.char_count,
            include_hidden=self.policy.include_hidden,
            file_fingerprints=scan.fingerprints,
        )
        self.store.save(record)
        logger.info(
            f"Session started for {project_path}: "
            f"{scan.line_count} lines in {scan.file_count} files"
        )
        return record

    def end_session(self) -> SessionSummary:
        """
        Re-measure the active project and close the session.

        The record is deleted only after the summary is built, so a failed or
        interrupted end leaves the session active.

        Raises:
            NoActiveSession: If no session record exists.
            ProjectPathUnavailable: If the stored directory can not be scanned.
        """
        record = self.store.load()
        if record is None:
            raise NoActiveSession()

        policy = ScanPolicy(
            include_hidden=record.include_hidden, workers=self.policy.workers
        )
        try:
            scan = scan_tree(record.project_path, policy)
        except InvalidPath as e:
            raise ProjectPathUnavailable(record.project_path, e.reason)

        summary = self._summarize(record, scan, self.clock())
        self.store.clear()
        logger.info(
            f"Session ended for {record.project_path}: {summary.lines_delta:+d} lines"
        )
        return summary

    def discard_session(self) -> Optional[SessionRecord]:
        """
        Drop the active session without measuring it.

        Returns:
            The discarded record, or None if the record was unreadable.

        Raises:
            NoActiveSession: If no session record exists.
        """
        try:
            record = self.store.load()
        except CorruptSessionRecord:
            self.store.clear()
            logger.warning(f"Discarded unreadable session record {self.store.path}")
            return None

        if record is None:
            raise NoActiveSession()
        self.store.clear()
        logger.info(f"Discarded session for {record.project_path}")
        return record

    @staticmethod
    def _summarize(
        record: SessionRecord, scan: ScanResult, end_time: datetime
    ) -> SessionSummary:
        duration = max(end_time - record.start_time, timedelta(0))
        created, modified, deleted = diff_fingerprints(
            record.file_fingerprints, scan.fingerprints
        )
        return SessionSummary(
            project_path=record.project_path,
            start_time=record.start_time,
            end_time=end_time,
            duration=duration,
            initial_line_count=record.initial_line_count,
            final_line_count=scan.line_count,
            lines_delta=scan.line_count - record.initial_line_count,
            initial_char_count=record.initial_char_count,
            final_char_count=scan.char_count,
            chars_delta=scan.char_count - record.initial_char_count,
            files_created=created,
            files_modified=modified,
            files_deleted=deleted,
            warnings=len(scan.warnings),
        )
