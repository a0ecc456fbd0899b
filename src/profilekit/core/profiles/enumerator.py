"""Best-effort listing of profiles stored in the user tiers."""
from __future__ import annotations

import logging
from typing import Iterator, List

from profilekit.core.exceptions import ProfileIOError, ProfileParseError

from .loader import load_document
from .locator import ProfileLocator
from .models import ScanOutcome, display_name

logger = logging.getLogger(__name__)


class ProfileEnumerator:
    """Lists profile names visible in user-writable storage."""

    def __init__(self, locator: ProfileLocator) -> None:
        self.locator = locator

    def scan(self) -> Iterator[ScanOutcome]:
        """Yield one outcome per candidate file in the user directories."""
        ext = self.locator.settings.extension
        try:
            directories = self.locator.user_directories()
        except ProfileIOError as exc:
            logger.debug("Skipping %s: %s", exc.path, exc)
            yield ScanOutcome(exc.path, skipped=str(exc))
            return

        for directory in directories:
            try:
                candidates = sorted(directory.glob(f"*{ext}"))
            except OSError as exc:
                error = ProfileIOError(directory, exc.strerror or str(exc))
                logger.debug("Skipping %s: %s", directory, error)
                yield ScanOutcome(directory, skipped=str(error))
                continue
            for path in candidates:
                if not path.is_file():
                    continue
                try:
                    document = load_document(path)
                except (ProfileIOError, ProfileParseError) as exc:
                    logger.debug("Skipping %s: %s", path, exc)
                    yield ScanOutcome(path, skipped=str(exc))
                    continue
                yield ScanOutcome(path, name=display_name(document, path.stem))

    def list_names(self) -> List[str]:
        """Return sorted, de-duplicated names from successful outcomes."""
        return sorted({o.name for o in self.scan() if o.name is not None})


__all__ = ["ProfileEnumerator"]
