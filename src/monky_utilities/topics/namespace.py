"""Process-wide topic namespace prefix.

``MONKY_CORE_NAMESPACE`` is read once, on first use, and cached for the
life of the process.  Later changes to the environment are ignored; a
restart (or :func:`reset_namespace_cache` in tests / forked workers) is
required to pick them up.
"""

from __future__ import annotations

import logging
import threading

from monky_utilities.core.config import NamespaceSettings

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_prefix: str | None = None


def _read_prefix() -> str:
    namespace = NamespaceSettings().namespace
    return f"{namespace}." if namespace else ""


def namespace_prefix() -> str:
    """Return ``"<namespace>."`` or ``""`` when no namespace is configured."""
    global _prefix
    prefix = _prefix
    if prefix is not None:
        return prefix
    with _lock:
        if _prefix is None:
            _prefix = _read_prefix()
            logger.debug("Topic namespace prefix resolved to %r", _prefix)
        return _prefix


def reset_namespace_cache() -> None:
    """Forget the cached prefix so the next access re-reads the environment."""
    global _prefix
    with _lock:
        _prefix = None
