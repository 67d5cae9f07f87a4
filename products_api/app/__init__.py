"""
Application package initializer.

Contains the main entrypoint for the API and its submodules: ``core``
(configuration, logging, security and error handling), ``schemas``,
``services`` and ``api``.
"""

from .main import app  # noqa: F401
