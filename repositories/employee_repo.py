"""
repositories/employee_repo.py
-----------------------------
Data access object for Northwind employees.
All SQL statements related to the `employees` table live here.
"""

from db.parameters import (
    Column,
    SqlType,
    bind_parameters,
    insert_statement,
    select_list,
    update_statement,
)
from repositories.base import SqlDataAccessObject, require_page, require_positive, require_present
from repositories.errors import EmployeeNotFoundError
from repositories.transfer_objects import EmployeeTransferObject
from utils.logger import get_logger

logger = get_logger(__name__)

EMPLOYEE_ID = Column("employee_id", SqlType.INTEGER, nullable=False)

EMPLOYEE_COLUMNS = (
    Column("last_name", SqlType.VARCHAR, 20, nullable=False),
    Column("first_name", SqlType.VARCHAR, 10, nullable=False),
    Column("title", SqlType.VARCHAR, 30),
    Column("title_of_courtesy", SqlType.VARCHAR, 25),
    Column("birth_date", SqlType.DATE),
    Column("hire_date", SqlType.DATE),
    Column("address", SqlType.VARCHAR, 60),
    Column("city", SqlType.VARCHAR, 15),
    Column("region", SqlType.VARCHAR, 15),
    Column("postal_code", SqlType.VARCHAR, 10),
    Column("country", SqlType.VARCHAR, 15),
    Column("home_phone", SqlType.VARCHAR, 24),
    Column("extension", SqlType.VARCHAR, 4),
    Column("photo", SqlType.BYTEA),
    Column("notes", SqlType.TEXT),
    Column("reports_to", SqlType.INTEGER),
    Column("photo_path", SqlType.VARCHAR, 255),
)

_SELECT = f"SELECT {select_list((EMPLOYEE_ID,) + EMPLOYEE_COLUMNS, 'e')} FROM employees AS e"


class EmployeeDataAccessObject(SqlDataAccessObject):
    """Issues parameterized statements against the employees table."""

    # ── CREATE ────────────────────────────────────────────

    def insert_employee(self, employee: EmployeeTransferObject) -> int:
        """
        Insert a new employee.

        Args:
            employee: The record to persist; its `id` is ignored.

        Returns:
            The identifier assigned by the database.
        """
        require_present(employee, "employee")
        sql = insert_statement("employees", EMPLOYEE_COLUMNS, EMPLOYEE_ID.name)
        employee_id = self._execute_scalar(sql, bind_parameters(EMPLOYEE_COLUMNS, employee), EMPLOYEE_ID.name)
        logger.info(f"Inserted employee #{employee_id}")
        return employee_id

    # ── READ ──────────────────────────────────────────────

    def find_employee(self, employee_id: int) -> EmployeeTransferObject:
        """
        Fetch a single employee.

        Raises:
            ValueError: If `employee_id` is not positive.
            EmployeeNotFoundError: If no employee has that identifier.
        """
        require_positive(employee_id, "employee_id")
        sql = f"{_SELECT} WHERE e.employee_id = {EMPLOYEE_ID.placeholder};"
        row = self._fetch_one(sql, {"employee_id": employee_id})
        if row is None:
            raise EmployeeNotFoundError(employee_id)
        return EmployeeTransferObject.from_row(row)

    def select_employees(self, offset: int, limit: int) -> list[EmployeeTransferObject]:
        """
        Fetch one page of employees in ascending identifier order.

        Args:
            offset: Number of rows to skip (>= 0).
            limit: Maximum number of rows to return (>= 1).
        """
        require_page(offset, limit)
        sql = f"{_SELECT} ORDER BY e.employee_id OFFSET %(offset)s LIMIT %(limit)s;"
        rows = self._fetch_all(sql, {"offset": offset, "limit": limit})
        return [EmployeeTransferObject.from_row(r) for r in rows]

    # ── UPDATE ────────────────────────────────────────────

    def update_employee(self, employee: EmployeeTransferObject) -> bool:
        """
        Overwrite every column of an existing employee.

        Returns:
            True if a row was updated, False otherwise.
        """
        require_present(employee, "employee")
        require_positive(employee.id, "employee.id")
        params = bind_parameters(EMPLOYEE_COLUMNS, employee)
        params[EMPLOYEE_ID.name] = EMPLOYEE_ID.bind(employee.id)
        return self._execute_non_query(update_statement("employees", EMPLOYEE_COLUMNS, EMPLOYEE_ID), params)

    # ── DELETE ────────────────────────────────────────────

    def delete_employee(self, employee_id: int) -> bool:
        """
        Delete an employee by identifier.

        Returns:
            True if a row was deleted, False otherwise.
        """
        require_positive(employee_id, "employee_id")
        sql = f"DELETE FROM employees WHERE employee_id = {EMPLOYEE_ID.placeholder};"
        deleted = self._execute_non_query(sql, {"employee_id": employee_id})
        if deleted:
            logger.info(f"Deleted employee #{employee_id}")
        return deleted
