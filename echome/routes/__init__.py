# echome/routes/__init__.py
# Blueprints are imported directly by the application factory.
