# echome/tests/__init__.py
