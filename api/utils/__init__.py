"""
Shared helpers and FastAPI dependencies.
"""
