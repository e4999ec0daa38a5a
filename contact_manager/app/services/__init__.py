"""
Service layer abstraction.

Each service encapsulates persistence logic for a domain so that API
handlers never touch SQL directly.
"""
