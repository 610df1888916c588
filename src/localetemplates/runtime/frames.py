"""Memoized existence check for the shared frame templates.

Frame pages are composed with a fixed set of frame files. Before the first
frame page is built, every frame must exist in the default tier; the
requested language plays no part in this check.

State machine:
    UNKNOWN --all present--> VALID     (terminal, never re-checked)
    UNKNOWN --any missing--> INVALID   (logged, retried on the next call)
    INVALID --all present--> VALID

Debug mode does not bypass a VALID result: frame files are assumed static
for the lifetime of the validator. reset() returns to UNKNOWN; it is only
ever called explicitly, typically after the root path or frame set changed.

The validator owns its lock, separate from the template caches, so
filesystem probing never blocks cache lookups.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from threading import Lock

from localetemplates.enums import FrameState
from localetemplates.loading.resolver import describe_path, resolve_template_path

__all__ = ["FrameValidator"]

logger = logging.getLogger(__name__)


class FrameValidator:
    """Tri-state memo of whether all frame files exist."""

    __slots__ = ("_lock", "_state")

    def __init__(self) -> None:
        """Initialize in the UNKNOWN state."""
        self._lock = Lock()
        self._state = FrameState.UNKNOWN

    @property
    def state(self) -> FrameState:
        """Current memoized state."""
        return self._state

    def ensure_frames_exist(
        self,
        root: str | os.PathLike[str],
        frames: Sequence[str],
    ) -> bool:
        """Check that every frame resolves in the default tier.

        Every missing frame is logged at error level with the path where it
        was expected.

        Args:
            root: Template root directory
            frames: Logical frame names

        Returns:
            True if all frames exist (now or on an earlier call)
        """
        with self._lock:
            if self._state is FrameState.VALID:
                return True

            missing = [
                frame for frame in frames if resolve_template_path(root, frame, "") is None
            ]
            for frame in missing:
                logger.error("frame file %s does not exist", describe_path(root, frame))

            if missing:
                self._state = FrameState.INVALID
                return False

            self._state = FrameState.VALID
            logger.debug("Validated %d frame files under %s", len(frames), root)
            return True

    def reset(self) -> None:
        """Forget the memoized result."""
        with self._lock:
            self._state = FrameState.UNKNOWN
