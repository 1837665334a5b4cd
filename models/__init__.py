"""
models/ - Domain Layer
======================
Plain dataclasses for owners, pets, visits and pet types.
No database access lives here.
"""
