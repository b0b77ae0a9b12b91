from .store import RecordStore

__all__ = ['RecordStore']
