# echome/components/__init__.py
