"""
Request handlers behind the frontend API blueprints.
"""
