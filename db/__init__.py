"""
db/ - Database Layer
====================
PostgreSQL storage driver and schema initialization.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
