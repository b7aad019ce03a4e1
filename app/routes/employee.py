# app/routes/employee.py
import logging
import uuid

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from app.database import get_employee_repository
from app.exceptions import InvalidRequestError
from app.models.employee import EmployeeModel
from app.repositories.employee import EmployeeRepository
from app.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut
from app.schemas.envelope import Envelope

logger = logging.getLogger(__name__)

router = APIRouter()

def to_out(employee: EmployeeModel) -> dict:
    return EmployeeOut.model_validate(employee).model_dump()

async def decode_body(request: Request, schema):
    """Parse the raw body as JSON whatever Content-Type the client sent."""
    body = await request.body()
    try:
        return schema.model_validate_json(body)
    except ValidationError as e:
        raise InvalidRequestError("Invalid request body", context={"errors": e.errors()}) from e

@router.post("/employee", response_model=Envelope, response_model_exclude_unset=True,
             status_code=status.HTTP_201_CREATED)
async def create_employee(request: Request,
                          repo: EmployeeRepository = Depends(get_employee_repository)):
    employee = await decode_body(request, EmployeeCreate)
    # Client-supplied ids are discarded.
    new_employee = EmployeeModel(id=str(uuid.uuid4()), name=employee.name, department=employee.department)
    result = await repo.save(new_employee)
    logger.info("Created employee %s", new_employee.id)
    return Envelope.success({
        "inserted_id": str(result.inserted_id),
        "acknowledged": result.acknowledged,
    })

@router.get("/employee/{employee_id}", response_model=Envelope, response_model_exclude_unset=True)
async def get_employee(employee_id: str, repo: EmployeeRepository = Depends(get_employee_repository)):
    logger.info("employee id %s", employee_id)
    employee = await repo.find_by_id(employee_id)
    return Envelope.success(to_out(employee))

@router.get("/employee", response_model=Envelope, response_model_exclude_unset=True)
async def get_employees(repo: EmployeeRepository = Depends(get_employee_repository)):
    employees = await repo.find_all()
    return Envelope.success([to_out(employee) for employee in employees])

@router.put("/employee/{employee_id}", response_model=Envelope, response_model_exclude_unset=True)
async def update_employee(employee_id: str, request: Request,
                          repo: EmployeeRepository = Depends(get_employee_repository)):
    logger.info("employee id %s", employee_id)
    if not employee_id.strip():
        raise InvalidRequestError("Invalid employee ID")

    employee = await decode_body(request, EmployeeUpdate)
    modified = await repo.update_by_id(employee_id, employee.settable_fields())
    return Envelope.success(modified)

@router.delete("/employee/{employee_id}", response_model=Envelope, response_model_exclude_unset=True)
async def delete_employee(employee_id: str, repo: EmployeeRepository = Depends(get_employee_repository)):
    logger.info("employee id %s", employee_id)
    deleted = await repo.delete_by_id(employee_id)
    return Envelope.success(deleted)

@router.delete("/employee", response_model=Envelope, response_model_exclude_unset=True)
async def delete_employees(repo: EmployeeRepository = Depends(get_employee_repository)):
    deleted = await repo.delete_all()
    logger.info("Deleted %d employees", deleted)
    return Envelope.success(deleted)
