"""Domain routers for the API."""
