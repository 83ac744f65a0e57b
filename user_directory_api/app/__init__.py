"""
Application package initializer.

The project is organised into logical pieces: ``core`` holds
configuration, logging, errors and password hashing; ``models`` the
stored record; ``schemas`` the request and response bodies;
``services`` the record store and the service layer; and ``api`` the
versioned routes with their validation stage.
"""

from .main import app, create_app  # noqa: F401
