"""
API package containing the HTTP routes.

``router`` aggregates the domain routers and is mounted under ``/api``
by the application factory.
"""
