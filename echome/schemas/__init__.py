# echome/schemas/__init__.py

from .memory import MemoryCreateSchema, MessageRequestSchema

__all__ = ['MemoryCreateSchema', 'MessageRequestSchema']
