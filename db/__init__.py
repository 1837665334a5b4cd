"""
db/ - Database Layer
====================
PostgreSQL connection pooling and the clinic schema (owners, pets, visits, types).
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
