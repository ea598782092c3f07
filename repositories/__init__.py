"""
repositories/ - Data Access Layer
==================================
Each data-access object encapsulates all SQL statements for one Northwind entity.
Data-access objects receive rows from the database and return transfer objects.
"""
