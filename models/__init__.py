"""
models/ - Domain Layer
======================
Plain dataclasses for the Northwind entities. Services accept and return
these; the data-access objects never see them directly.
"""
