"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Every operation issues exactly one statement on a pooled connection and
returns domain model objects; database errors are logged and re-raised.
"""
