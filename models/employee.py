"""
models/employee.py
------------------
Domain model for Northwind employees.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Employee:
    """
    Represents a member of staff.

    Attributes:
        employee_id: Database primary key (0 for new records).
        last_name: Family name (required).
        first_name: Given name (required).
        title: Job title.
        title_of_courtesy: Mr., Ms., Dr. and so on.
        birth_date: Date of birth.
        hire_date: Date the employee was hired.
        address: Street address.
        city: City.
        region: State or region.
        postal_code: Postal code.
        country: Country.
        home_phone: Home phone number.
        extension: Internal phone extension.
        photo: Raw photo bytes.
        notes: Free-form notes.
        reports_to: Identifier of the employee's manager.
        photo_path: URL or path of the photo.
    """
    last_name: str
    first_name: str
    employee_id: int = 0
    title: Optional[str] = None
    title_of_courtesy: Optional[str] = None
    birth_date: Optional[date] = None
    hire_date: Optional[date] = None
    address: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    home_phone: Optional[str] = None
    extension: Optional[str] = None
    photo: Optional[bytes] = None
    notes: Optional[str] = None
    reports_to: Optional[int] = None
    photo_path: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return f"#{self.employee_id} {self.full_name} ({self.title or 'no title'})"
