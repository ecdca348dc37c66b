"""Logging handler that writes to a timestamped file and stows it as an xz archive."""

from __future__ import annotations

import lzma
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import BinaryIO

import logging

_FILE_NAME_FORMAT = "%S%M%H_%d%m%Y.log"
_RECORD_FORMAT = "%(levelname)s %(name)s %(pathname)s:%(lineno)d %(message)s"
_DEFAULT_MAX_XZ_LOGS = 10
_DEFAULT_COMPRESS_LEVEL = 9


class OdatrekLogger(logging.Handler):
    """Handler that logs every record at or above ``file_log_level`` to a file
    and echoes records at or above ``console_log_level`` to standard output.

    With no file level every record goes to the file; with no console level
    only errors and above are printed.
    """

    def __init__(
        self,
        file_dir: str | os.PathLike[str],
        file_log_level: int | None = None,
        console_log_level: int | None = None,
    ) -> None:
        super().__init__(logging.NOTSET)
        self.setFormatter(logging.Formatter(_RECORD_FORMAT))
        self.file_dir = Path(file_dir)
        self.file_dir.mkdir(parents=True, exist_ok=True)
        self.file_name = datetime.now().strftime(_FILE_NAME_FORMAT)
        self.file_log_level = logging.NOTSET if file_log_level is None else file_log_level
        self.console_log_level = logging.ERROR if console_log_level is None else console_log_level
        # Opened for reading and writing, created if missing, never truncated.
        fd = os.open(self.path, os.O_RDWR | os.O_CREAT, 0o644)
        self._file: BinaryIO | None = os.fdopen(fd, "r+b")

    @property
    def path(self) -> Path:
        """Path of the plain-text log file."""
        return self.file_dir / self.file_name

    @property
    def archive_path(self) -> Path:
        """Path the log file is stowed to."""
        return self.file_dir / (self.file_name + ".xz")

    def enabled(self, level: int) -> bool:
        """Whether a record of ``level`` is written to the file."""
        return level >= self.file_log_level

    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = self.format(record)
            if self.enabled(record.levelno) and self._file is not None:
                self._file.write((text + "\n").encode("utf-8"))
            if record.levelno >= self.console_log_level:
                print(text + "\n", file=sys.stdout)
        except Exception:
            self.handleError(record)

    def flush(self) -> None:
        with self.lock if self.lock is not None else _null_context():
            if self._file is not None:
                self._file.flush()

    def stow_log(
        self,
        max_xz_logs: int | None = None,
        compress_level: int | None = None,
    ) -> Path:
        """Compress the log file to an xz archive beside it and delete the original.

        Older archives in the directory are removed, smallest name first, so
        that at most ``max_xz_logs`` remain once the new one is written.
        Returns the path of the new archive.
        """
        limit = max(_DEFAULT_MAX_XZ_LOGS if max_xz_logs is None else max_xz_logs, 1)
        level = _DEFAULT_COMPRESS_LEVEL if compress_level is None else compress_level
        if not 0 <= level <= 9:
            raise ValueError(f"compression level must be between 0 and 9, got {level}")

        with self.lock if self.lock is not None else _null_context():
            if self._file is None:
                raise RuntimeError("log file has already been stowed or closed")
            self._file.flush()

            archives = sorted(
                (entry for entry in self.file_dir.iterdir() if entry.suffix == ".xz"),
                key=lambda entry: entry.name,
                reverse=True,
            )
            while len(archives) >= limit:
                archives.pop().unlink()

            self._file.seek(0)
            data = self._file.read()
            self._file.close()
            self._file = None

            compressed = lzma.compress(
                data, format=lzma.FORMAT_XZ, check=lzma.CHECK_CRC32, preset=level
            )
            self.archive_path.write_bytes(compressed)
            self.path.unlink()
        return self.archive_path

    def close(self) -> None:
        with self.lock if self.lock is not None else _null_context():
            if self._file is not None:
                self._file.close()
                self._file = None
        super().close()


class _null_context:
    def __enter__(self) -> None:
        return None

    def __exit__(self, *exc: object) -> None:
        return None