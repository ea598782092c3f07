"""
services/ - Management Layer
============================
Thin services that validate identifiers, convert domain models to
transfer objects and forward each call to a data-access object
obtained from a data-access factory.
"""
