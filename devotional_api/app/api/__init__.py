"""
API package containing the HTTP routes.

``router`` in :mod:`devotional_api.app.api.router` aggregates the
domain-specific routers defined in ``endpoints``.
"""
