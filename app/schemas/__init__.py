# app/schemas/__init__.py
from .employee import EmployeeCreate, EmployeeUpdate, EmployeeOut
from .envelope import Envelope
