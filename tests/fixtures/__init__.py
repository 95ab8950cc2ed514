"""Shared pytest fixtures for the data, service and HTTP layers."""

from .core import *  # noqa: F401,F403
from .services import *  # noqa: F401,F403
