"""
Version 1 of the API.

The routes are served both at the root of the application and under
the ``/api/v1`` prefix.
"""
