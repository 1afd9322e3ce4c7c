"""Shared pytest fixtures."""

from .client import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
