# app/repositories/employee.py
import logging
from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo.errors import PyMongoError
from pymongo.results import InsertOneResult

from app.exceptions import EmployeeNotFoundError, PersistenceError
from app.models.employee import EmployeeModel

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """Single-collection persistence for employees.

    Every method is one driver call. Documents are keyed by ``_id``, which
    holds the employee's public id, so inserts, lookups, updates and deletes
    all agree on the same field.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def save(self, employee: EmployeeModel) -> InsertOneResult:
        try:
            return await self.collection.insert_one(employee.to_document())
        except PyMongoError as e:
            raise PersistenceError(
                "Failed to create employee",
                context={"employee_id": employee.id, "cause": str(e)},
            ) from e

    async def find_by_id(self, employee_id: str) -> EmployeeModel:
        # Missing documents, driver failures and undecodable documents all
        # surface as "not found".
        try:
            document = await self.collection.find_one({"_id": employee_id})
        except PyMongoError as e:
            raise EmployeeNotFoundError(employee_id, context={"cause": str(e)}) from e
        if document is None:
            raise EmployeeNotFoundError(employee_id)
        try:
            return EmployeeModel.model_validate(document)
        except ValidationError as e:
            raise EmployeeNotFoundError(employee_id, context={"cause": str(e)}) from e

    async def find_all(self) -> List[EmployeeModel]:
        try:
            documents = await self.collection.find({}).to_list(length=None)
            return [EmployeeModel.model_validate(document) for document in documents]
        except (PyMongoError, ValidationError) as e:
            raise PersistenceError(
                "Error retrieving employees", context={"cause": str(e)}
            ) from e

    async def update_by_id(self, employee_id: str, fields: Dict[str, Any]) -> int:
        fields = {k: v for k, v in fields.items() if k not in ("_id", "id")}
        if not fields:
            logger.info("Nothing to update for employee %s", employee_id)
            return 0
        try:
            result = await self.collection.update_one({"_id": employee_id}, {"$set": fields})
        except PyMongoError as e:
            raise PersistenceError(
                "Error updating employee",
                context={"employee_id": employee_id, "cause": str(e)},
            ) from e
        return result.modified_count

    async def delete_by_id(self, employee_id: str) -> int:
        try:
            result = await self.collection.delete_one({"_id": employee_id})
        except PyMongoError as e:
            raise PersistenceError(
                "Error deleting employee",
                context={"employee_id": employee_id, "cause": str(e)},
            ) from e
        return result.deleted_count

    async def delete_all(self) -> int:
        try:
            result = await self.collection.delete_many({})
        except PyMongoError as e:
            raise PersistenceError(
                "Error deleting all employees", context={"cause": str(e)}
            ) from e
        return result.deleted_count
