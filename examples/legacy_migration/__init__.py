"""Legacy migration -- minimal example of a settings session.

Reads a legacy storage blob, validates the migrated settings against the
live game, and exports the new JSON document, using only the public
``kitsci`` packages.

Modules:
    migrate: migrate_storage, MigrationResult
"""

from .migrate import MigrationResult, migrate_storage

__all__ = ["MigrationResult", "migrate_storage"]
