"""
Photo upload storage.

Files are renamed to ``<epoch-millis><ext>``; only the extension of the
client's filename survives, so no client path ever reaches the filesystem.
"""

from __future__ import annotations

import logging
import shutil
import time
from pathlib import Path
from typing import BinaryIO

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/uploads"


class UploadStore:
    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def ensure_directory(self) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        return self.directory

    async def save(self, upload: UploadFile | None) -> str:
        """Persist *upload* and return the stored filename ("" when nothing was sent)."""
        if upload is None or not upload.filename:
            return ""

        suffix = Path(upload.filename).suffix.lower()
        filename = await run_in_threadpool(
            self._write, upload.file, int(time.time() * 1000), suffix
        )
        logger.info("Stored upload %s as %s", upload.filename, filename)
        return filename

    def path_for(self, filename: str) -> Path:
        return self.directory / filename

    def _write(self, source: BinaryIO, stamp: int, suffix: str) -> str:
        """Claim the first free ``<stamp><suffix>`` name and copy *source* into it."""
        source.seek(0)
        while True:
            filename = f"{stamp}{suffix}"
            try:
                out = self.path_for(filename).open("xb")
            except FileExistsError:
                stamp += 1
                continue
            with out:
                shutil.copyfileobj(source, out)
            return filename
