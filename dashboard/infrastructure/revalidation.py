"""View Revalidation — per-path version counter bumped after each mutation.

Invariants:
    - revalidate(path) strictly increases version(path)
    - Unknown paths report version 0

Design Decisions:
    - Versions are served in the X-View-Version header so the dashboard front end
      can drop cached pages whose version is stale (ADR: no server-side page cache)
"""

import logging
import threading

logger = logging.getLogger(__name__)


class VersionedPathRevalidator:
    """In-process PathRevalidator shared by all requests of one worker."""

    def __init__(self):
        self._versions: dict[str, int] = {}
        self._lock = threading.Lock()

    def revalidate(self, path: str) -> None:
        with self._lock:
            self._versions[path] = self._versions.get(path, 0) + 1
            version = self._versions[path]
        logger.info(f"Revalidated {path} -> v{version}", extra={"path": path})

    def version(self, path: str) -> int:
        return self._versions.get(path, 0)
