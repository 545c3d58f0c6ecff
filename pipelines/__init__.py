from .ingest_listing import ingest, ingest_many, ingest_sync

__all__ = ["ingest", "ingest_many", "ingest_sync"]
