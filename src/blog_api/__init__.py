"""
Blog posts backend: a FastAPI resource server for blog posts stored in PostgreSQL
"""

__version__ = "1.0.0"
