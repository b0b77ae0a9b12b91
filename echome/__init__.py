"""
EchoMe backend package.
Contains the chat/memory API, its storage layer and the AI integrations.
Build the WSGI application with echome.app.create_app.
"""

__all__ = []
