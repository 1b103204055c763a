"""
Application package for the Devotional API.

The code is split into ``core`` (configuration, logging, store client,
errors), ``schemas`` (request/response models), ``services`` (SQL
operations) and ``api`` (HTTP routes).  ``create_app`` in ``main``
assembles them.
"""
