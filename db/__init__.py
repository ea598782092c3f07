"""
db/ - Database Layer
====================
Handles PostgreSQL connections, schema initialization, and the typed
parameter binding every data-access object builds its statements from.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
