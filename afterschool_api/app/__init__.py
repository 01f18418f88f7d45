"""
Application package initializer.

The project is split into a few small layers: ``core`` holds
configuration, logging, the database client and error types;
``services`` holds the lesson and order stores together with the
booking service that orchestrates them; ``schemas`` holds the Pydantic
request and response models; ``api`` exposes the HTTP routes.
"""

from .main import app  # noqa: F401
