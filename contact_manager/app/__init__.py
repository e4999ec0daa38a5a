"""
Application package initializer.

This package contains the backend for the contact manager: a single
``Contact`` resource exposed through list, create and delete routes
under ``/api/contacts``.  Persistence lives in ``services``, request
and response shapes in ``schemas`` and the HTTP routes in ``api``.
The ASGI application itself is ``contact_manager.app.main:app``; it is
not imported here so that clients can read ``core.config`` without
building the app.
"""
