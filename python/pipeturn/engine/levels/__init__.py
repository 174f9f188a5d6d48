from pipeturn.engine.levels.catalog import LevelCatalog, default_catalog

__all__ = ["LevelCatalog", "default_catalog"]
