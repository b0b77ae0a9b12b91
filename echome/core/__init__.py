# echome/core/__init__.py
