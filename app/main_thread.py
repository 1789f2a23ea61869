"""Main-thread dispatch for AppKit updates.

The status item may only be touched from the main thread. Configuration
change notifications are re-rendered asynchronously by queueing the work on
the main run loop with performSelectorOnMainThread.

Usage:
    from app.main_thread import call_on_main_thread

    call_on_main_thread(lambda: app.render_title())
"""

import threading
from typing import Callable

from config import get_logger

logger = get_logger(__name__)


# Global callback helper class - defined once at module level
_MainThreadHelper = None
_MainThreadHelperLock = threading.Lock()

# Helpers with queued callbacks; keeps them alive until they run
_pending = set()


def _get_main_thread_helper():
    """Get or create the NSObject subclass used for dispatch (thread-safe)."""
    global _MainThreadHelper

    if _MainThreadHelper is not None:
        return _MainThreadHelper

    with _MainThreadHelperLock:
        if _MainThreadHelper is not None:
            return _MainThreadHelper

        from Foundation import NSObject

        class _HostMenuMainThreadHelper(NSObject):
            """Runs a stored Python callable on the main thread."""

            callback_ref = None

            def doCallback_(self, _):
                _pending.discard(self)
                if self.callback_ref is None:
                    return
                try:
                    self.callback_ref()
                except Exception as e:
                    logger.error(f"Main thread callback failed: {e}", exc_info=True)

        _MainThreadHelper = _HostMenuMainThreadHelper

    return _MainThreadHelper


def call_on_main_thread(callback: Callable[[], None]) -> None:
    """Queue ``callback`` on the AppKit main run loop without waiting."""
    helper_class = _get_main_thread_helper()
    helper = helper_class.alloc().init()
    helper.callback_ref = callback
    _pending.add(helper)
    helper.performSelectorOnMainThread_withObject_waitUntilDone_(
        "doCallback:", None, False
    )
