"""Specials API.

A small REST service for users and menu specials built on FastAPI and
SQLModel. Routers live in ``api.http``, services in ``core.services`` and the
persistence models in ``entities``.
"""

__version__ = "1.0.0"
