"""
Line counter: walks a project directory and totals the physical lines of
every qualifying file.

Policy:
- Only regular files whose extension is in ``RECOGNIZED_EXTENSIONS`` count.
- Symbolic links are never followed, neither into directories nor to files.
- Hidden entries are included unless ``ScanPolicy.include_hidden`` is False.
- A file that can not be read, contains NUL bytes, or is not valid UTF-8 is
  skipped with a ``ScanWarning``; the scan itself keeps going.
"""

import hashlib
import os
import stat
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from ego.config import DEFAULT_WORKERS
from ego.errors import InvalidPath
from ego.extensions import is_recognized
from ego.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ScanPolicy:
    """Knobs that decide which files a scan visits and how it reads them."""

    include_hidden: bool = True
    workers: int = DEFAULT_WORKERS


@dataclass
class ScanWarning:
    """A qualifying file or directory the scan had to skip."""

    path: str
    reason: str


@dataclass
class FileStats:
    line_count: int
    char_count: int
    fingerprint: str


@dataclass
class ScanResult:
    """Totals for one scan of a project tree."""

    line_count: int = 0
    char_count: int = 0
    file_count: int = 0
    fingerprints: Dict[str, str] = field(default_factory=dict)
    warnings: List[ScanWarning] = field(default_factory=list)


def count_physical_lines(data: bytes) -> int:
    """
    Count newline-terminated segments, plus a trailing unterminated one.

    ``b"a\\nb"`` is two lines, ``b"a\\n"`` is one, ``b""`` is zero.
    """
    if not data:
        return 0
    lines = data.count(b"\n")
    if not data.endswith(b"\n"):
        lines += 1
    return lines


def resolve_root(root: Union[str, os.PathLike]) -> Path:
    """Resolve ``root`` to an absolute directory or raise ``InvalidPath``."""
    path = Path(root).expanduser()
    try:
        resolved = path.resolve(strict=True)
    except (OSError, RuntimeError):
        raise InvalidPath(path, "does not exist")

    if not resolved.is_dir():
        raise InvalidPath(path, "not a directory")
    if not os.access(resolved, os.R_OK | os.X_OK):
        raise InvalidPath(path, "permission denied")
    return resolved


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _collect_files(
    root: Path, policy: ScanPolicy, warnings: List[ScanWarning]
) -> List[Tuple[Path, str]]:
    """Depth-first walk returning ``(absolute path, relative key)`` pairs."""
    files: List[Tuple[Path, str]] = []
    stack = [root]

    while stack:
        directory = stack.pop()
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            if directory == root:
                raise InvalidPath(root, f"can not list directory: {e.strerror or e}")
            rel = Path(directory).relative_to(root).as_posix()
            logger.warning(f"Skipping unreadable directory {rel}: {e}")
            warnings.append(ScanWarning(path=rel, reason=str(e.strerror or e)))
            continue

        for entry in entries:
            if not policy.include_hidden and _is_hidden(entry.name):
                continue
            try:
                if entry.is_symlink():
                    logger.debug(f"Not following symlink: {entry.path}")
                    continue
                if entry.is_dir(follow_symlinks=False):
                    stack.append(Path(entry.path))
                elif entry.is_file(follow_symlinks=False) and is_recognized(entry.name):
                    entry_path = Path(entry.path)
                    files.append((entry_path, entry_path.relative_to(root).as_posix()))
            except OSError as e:
                rel = Path(entry.path).relative_to(root).as_posix()
                logger.warning(f"Skipping {rel}: {e}")
                warnings.append(ScanWarning(path=rel, reason=str(e.strerror or e)))

    files.sort(key=lambda item: item[1])
    return files


def _read_regular_file(path: Path) -> bytes:
    # O_NONBLOCK keeps open() from hanging if the entry was swapped for a FIFO
    fd = os.open(path, os.O_RDONLY | getattr(os, "O_NONBLOCK", 0))
    with os.fdopen(fd, "rb") as f:
        if not stat.S_ISREG(os.fstat(f.fileno()).st_mode):
            raise OSError(f"not a regular file: {path}")
        return f.read()


def measure_file(path: Path) -> Union[FileStats, str]:
    """
    Measure one qualifying file.

    Returns:
        FileStats on success, or the reason the file was skipped.
    """
    try:
        data = _read_regular_file(path)
    except OSError as e:
        return str(e.strerror or e)

    if b"\x00" in data:
        return "binary content"
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return "not valid UTF-8"

    return FileStats(
        line_count=count_physical_lines(data),
        char_count=len(text),
        fingerprint=hashlib.sha256(data).hexdigest(),
    )


def scan_tree(
    root: Union[str, os.PathLike], policy: Optional[ScanPolicy] = None
) -> ScanResult:
    """
    Scan a project directory.

    Args:
        root: Directory to scan; must exist.
        policy: Hidden-entry and worker settings (defaults to ScanPolicy()).

    Returns:
        ScanResult with totals, per-file fingerprints and skipped entries.

    Raises:
        InvalidPath: If root is missing, not a directory, or unlistable.
    """
    policy = policy or ScanPolicy()
    root_path = resolve_root(root)

    result = ScanResult()
    files = _collect_files(root_path, policy, result.warnings)
    paths = [path for path, _ in files]

    if policy.workers > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=policy.workers) as pool:
            measured = list(pool.map(measure_file, paths))
    else:
        measured = [measure_file(path) for path in paths]

    for (_, rel), stats in zip(files, measured):
        if isinstance(stats, str):
            logger.warning(f"Skipping {rel}: {stats}")
            result.warnings.append(ScanWarning(path=rel, reason=stats))
            continue
        result.line_count += stats.line_count
        result.char_count += stats.char_count
        result.file_count += 1
        result.fingerprints[rel] = stats.fingerprint

    logger.debug(
        f"Scanned {root_path}: {result.file_count} files, "
        f"{result.line_count} lines, {len(result.warnings)} skipped"
    )
    return result


def count_lines(
    root: Union[str, os.PathLike], policy: Optional[ScanPolicy] = None
) -> int:
    """Total physical line count of all qualifying files under ``root``."""
    return scan_tree(root, policy).line_count
