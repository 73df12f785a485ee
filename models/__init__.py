"""
models/ - Domain Models
=======================
Plain dataclasses for players, users, libraries and games.
No database access happens here.
"""
