"""
Service layer.

Each service encapsulates the SQL for a domain and is handed its store
client explicitly, keeping API handlers free of database code.
"""
