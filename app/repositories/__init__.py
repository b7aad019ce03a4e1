# app/repositories/__init__.py
from .employee import EmployeeRepository
