"""gelfsend public API."""

from .api import configure, get_dispatcher, get_handler, initialize, send, shutdown
from .core.dispatcher import Dispatcher
from .core.levels import Severity
from .handlers.gelf import GELFHandler
from .version import __version__

__all__ = [
    "configure",
    "initialize",
    "send",
    "get_handler",
    "get_dispatcher",
    "shutdown",
    "Dispatcher",
    "GELFHandler",
    "Severity",
    "__version__",
]
