"""
Application layer.

Use cases orchestrate domain entities through repository protocols. Nothing
here imports SQLAlchemy or FastAPI directly.
"""
