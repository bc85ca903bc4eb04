import logging
from datetime import datetime, timezone
from pathlib import Path

from src.common.exceptions import DocumentUnavailableException

logger = logging.getLogger(__name__)


class MissionControlDocument:
    """File-backed source of the MISSION_CONTROL markdown text."""

    def __init__(self, path: str | Path, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def read_text(self) -> str:
        try:
            text = self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError, LookupError) as e:
            logger.warning(f"Failed to read document '{self.path}': {e}")
            raise DocumentUnavailableException(str(self.path), str(e)) from e

        logger.debug(f"Read {len(text)} characters from '{self.path}'")
        return text

    def exists(self) -> bool:
        return self.path.is_file()

    def modified_at(self) -> datetime | None:
        try:
            mtime = self.path.stat().st_mtime
        except OSError:
            return None
        return datetime.fromtimestamp(mtime, tz=timezone.utc)
