"""Unit tests for EmployeeDataAccessObject against a mocked psycopg2 connection."""

from datetime import date
from unittest.mock import MagicMock

import psycopg2
import pytest

from repositories.employee_repo import EmployeeDataAccessObject
from repositories.errors import EmployeeNotFoundError
from repositories.transfer_objects import EmployeeTransferObject


@pytest.fixture
def dao(connection: MagicMock) -> EmployeeDataAccessObject:
    return EmployeeDataAccessObject(connection)


def _employee(**overrides) -> EmployeeTransferObject:
    fields = {"last_name": "Fuller", "first_name": "Andrew", "hire_date": date(1992, 8, 14)}
    fields.update(overrides)
    return EmployeeTransferObject(**fields)


def test_requires_a_connection() -> None:
    with pytest.raises(ValueError, match="'connection' is required"):
        EmployeeDataAccessObject(None)


class TestFindEmployee:
    def test_materializes_row_by_column_name(self, dao, cursor, employee_row) -> None:
        cursor.fetchone.return_value = employee_row

        employee = dao.find_employee(1)

        assert employee.id == 1
        assert employee.last_name == "Davolio"
        assert employee.photo == b"\x89PNG"
        assert employee.reports_to == 2
        sql, params = cursor.execute.call_args.args
        assert "WHERE e.employee_id = %(employee_id)s::integer" in sql
        assert params == {"employee_id": 1}

    def test_null_columns_stay_none(self, dao, cursor, employee_row) -> None:
        employee_row.update(photo=None, reports_to=None, birth_date=None)
        cursor.fetchone.return_value = employee_row

        employee = dao.find_employee(1)

        assert employee.photo is None
        assert employee.reports_to is None
        assert employee.birth_date is None

    def test_missing_row_raises_not_found(self, dao, cursor) -> None:
        with pytest.raises(EmployeeNotFoundError) as exc_info:
            dao.find_employee(42)
        assert exc_info.value.entity_id == 42
        assert "Employee with id 42 not found." in str(exc_info.value)

    @pytest.mark.parametrize("employee_id", [0, -1, -100])
    def test_non_positive_id_is_rejected_before_any_statement(self, dao, cursor, employee_id) -> None:
        with pytest.raises(ValueError, match="greater than zero"):
            dao.find_employee(employee_id)
        cursor.execute.assert_not_called()


class TestSelectEmployees:
    def test_pages_in_identifier_order(self, dao, cursor, employee_row) -> None:
        cursor.fetchall.return_value = [employee_row, dict(employee_row, employee_id=2)]

        employees = dao.select_employees(0, 2)

        assert [e.id for e in employees] == [1, 2]
        sql, params = cursor.execute.call_args.args
        assert "ORDER BY e.employee_id OFFSET %(offset)s LIMIT %(limit)s" in sql
        assert params == {"offset": 0, "limit": 2}

    def test_empty_page(self, dao, cursor) -> None:
        assert dao.select_employees(100, 10) == []

    @pytest.mark.parametrize("offset, limit", [(-1, 10), (0, 0), (0, -5)])
    def test_bad_bounds_are_rejected(self, dao, cursor, offset, limit) -> None:
        with pytest.raises(ValueError):
            dao.select_employees(offset, limit)
        cursor.execute.assert_not_called()


class TestInsertEmployee:
    def test_returns_generated_identifier_and_commits(self, dao, connection, cursor) -> None:
        cursor.fetchone.return_value = {"employee_id": 10}

        assert dao.insert_employee(_employee(photo=b"abc")) == 10

        sql, params = cursor.execute.call_args.args
        assert sql.startswith("INSERT INTO employees (last_name, first_name, title")
        assert "%(last_name)s::varchar(20)" in sql
        assert sql.endswith("RETURNING employee_id;")
        assert params["last_name"] == "Fuller"
        assert params["region"] is None
        assert "employee_id" not in params
        connection.commit.assert_called_once()

    def test_none_is_rejected(self, dao, cursor) -> None:
        with pytest.raises(ValueError, match="'employee' is required"):
            dao.insert_employee(None)
        cursor.execute.assert_not_called()

    def test_too_long_name_is_rejected_before_any_statement(self, dao, cursor) -> None:
        with pytest.raises(ValueError, match="'first_name' must be at most 10 characters"):
            dao.insert_employee(_employee(first_name="Maximiliane"))
        cursor.execute.assert_not_called()

    def test_missing_required_name_is_rejected(self, dao, cursor) -> None:
        with pytest.raises(ValueError, match="'last_name' is required"):
            dao.insert_employee(_employee(last_name=None))

    def test_store_failure_rolls_back_and_propagates(self, dao, connection, cursor) -> None:
        cursor.execute.side_effect = psycopg2.Error("connection lost")

        with pytest.raises(psycopg2.Error):
            dao.insert_employee(_employee())

        connection.rollback.assert_called_once()
        connection.commit.assert_not_called()


class TestUpdateEmployee:
    def test_affected_row_reports_success(self, dao, connection, cursor) -> None:
        cursor.rowcount = 1

        assert dao.update_employee(_employee(id=5, city="London")) is True

        sql, params = cursor.execute.call_args.args
        assert sql.startswith("UPDATE employees SET last_name = %(last_name)s::varchar(20)")
        assert sql.endswith("WHERE employee_id = %(employee_id)s::integer;")
        assert params["employee_id"] == 5
        assert params["city"] == "London"
        connection.commit.assert_called_once()

    def test_no_affected_row_reports_false(self, dao, cursor) -> None:
        cursor.rowcount = 0
        assert dao.update_employee(_employee(id=999)) is False

    def test_unsaved_record_is_rejected(self, dao, cursor) -> None:
        with pytest.raises(ValueError, match="'employee.id' must be greater than zero"):
            dao.update_employee(_employee(id=0))
        cursor.execute.assert_not_called()


class TestDeleteEmployee:
    def test_deleted_row_reports_true(self, dao, cursor) -> None:
        cursor.rowcount = 1
        assert dao.delete_employee(3) is True
        sql, params = cursor.execute.call_args.args
        assert sql == "DELETE FROM employees WHERE employee_id = %(employee_id)s::integer;"
        assert params == {"employee_id": 3}

    def test_already_deleted_reports_false(self, dao, cursor) -> None:
        cursor.rowcount = 0
        assert dao.delete_employee(3) is False

    def test_non_positive_id_is_rejected(self, dao, cursor) -> None:
        with pytest.raises(ValueError):
            dao.delete_employee(0)
        cursor.execute.assert_not_called()
