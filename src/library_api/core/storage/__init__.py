from .record_store import InMemoryRecordStore, RecordStore, SqlRecordStore

__all__ = ["InMemoryRecordStore", "RecordStore", "SqlRecordStore"]
