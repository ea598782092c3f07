"""
services/employee_service.py
----------------------------
Management service for employees.
Validates identifiers, converts between domain models and transfer
objects, and forwards every call to the employee data-access object.
"""

from typing import Optional

from models.employee import Employee
from repositories.base import require_positive, require_present
from repositories.errors import EmployeeNotFoundError
from repositories.factory import NorthwindDataAccessFactory
from repositories.transfer_objects import EmployeeTransferObject
from utils.logger import get_logger

logger = get_logger(__name__)


class EmployeeManagementService:
    """
    CRUD surface for employees.

    Lookups never raise for a missing employee: `try_show_employee`
    returns ``(False, None)`` instead.
    """

    def __init__(self, factory: NorthwindDataAccessFactory):
        require_present(factory, "factory")
        self.factory = factory

    @property
    def dao(self):
        return self.factory.get_employee_data_access_object()

    def show_employees(self, offset: int, limit: int) -> list[Employee]:
        """Return one page of employees in ascending identifier order."""
        return [to.to_model() for to in self.dao.select_employees(offset, limit)]

    def try_show_employee(self, employee_id: int) -> tuple[bool, Optional[Employee]]:
        """
        Look up an employee.

        Returns:
            ``(True, employee)`` if found, ``(False, None)`` otherwise.
        """
        require_positive(employee_id, "employee_id")
        try:
            employee = self.dao.find_employee(employee_id).to_model()
        except EmployeeNotFoundError:
            logger.debug(f"Employee #{employee_id} not found")
            return False, None
        return True, employee

    def create_employee(self, employee: Employee) -> int:
        """Persist a new employee and return the identifier the database assigned."""
        require_present(employee, "employee")
        return self.dao.insert_employee(EmployeeTransferObject.from_model(employee))

    def destroy_employee(self, employee_id: int) -> bool:
        require_positive(employee_id, "employee_id")
        return self.dao.delete_employee(employee_id)

    def update_employee(self, employee_id: int, employee: Employee) -> bool:
        """
        Replace an employee's record.

        Returns:
            False if `employee_id` differs from ``employee.employee_id`` or
            no row was updated; True otherwise.
        """
        require_positive(employee_id, "employee_id")
        require_present(employee, "employee")
        if employee_id != employee.employee_id:
            return False
        return self.dao.update_employee(EmployeeTransferObject.from_model(employee))
