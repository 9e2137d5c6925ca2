# This must be the very first line to allow this package to coexist with other
# namespace packages in editable installs.
__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .messaging.bus import bus, MessageBus
from .messaging.catalog import MessageCatalog, default_catalog

__all__ = ["bus", "MessageBus", "MessageCatalog", "default_catalog"]
