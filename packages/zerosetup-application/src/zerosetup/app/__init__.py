__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .core import ZeroSetupApp
from .runners import CreateRunner, MigrateRunner, MigrationReport

__all__ = ["ZeroSetupApp", "CreateRunner", "MigrateRunner", "MigrationReport"]
