"""
db/ - Database Layer
====================
Owns the PostgreSQL connection pool, the LightBnB schema and the demo seed data.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
