from .create import CreateRunner
from .migrate import MigrateRunner, MigrationReport

__all__ = ["CreateRunner", "MigrateRunner", "MigrationReport"]
