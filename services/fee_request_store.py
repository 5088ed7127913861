# services/fee_request_store.py

from typing import List, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from core.database import FEE_REQUESTS_COLLECTION
from core.errors import handle_database_error


def serialize(doc: Optional[dict]) -> Optional[dict]:
    """Mongo document -> JSON-ready dict with a string _id"""
    if doc is None:
        return None
    out = dict(doc)
    out["_id"] = str(out["_id"])
    return out


def to_object_id(request_id: str) -> Optional[ObjectId]:
    """Malformed ids resolve to None (treated as not found)."""
    if isinstance(request_id, ObjectId):
        return request_id
    if not request_id or not ObjectId.is_valid(request_id):
        return None
    return ObjectId(request_id)


class FeeRequestStore:
    """
    Fee request documents.

    Reads return serialized dicts. `update_status` is the only mutation:
    a conditional update that succeeds only while the stored status still
    equals `expected_status`, and only touches the fields passed in.
    """

    def __init__(self, db: Database):
        self.collection = db[FEE_REQUESTS_COLLECTION]

    def insert(self, document: dict) -> str:
        try:
            result = self.collection.insert_one(document)
        except PyMongoError as e:
            raise handle_database_error(e, "Failed to submit fee request") from e
        return str(result.inserted_id)

    def find_by_id(self, request_id: str) -> Optional[dict]:
        oid = to_object_id(request_id)
        if oid is None:
            return None
        try:
            return serialize(self.collection.find_one({"_id": oid}))
        except PyMongoError as e:
            raise handle_database_error(e, "Failed to fetch request") from e

    def find_by_status(self, status: str) -> List[dict]:
        try:
            return [serialize(doc) for doc in self.collection.find({"status": status})]
        except PyMongoError as e:
            raise handle_database_error(e, "Failed to fetch requests") from e

    def find_all(self) -> List[dict]:
        try:
            return [serialize(doc) for doc in self.collection.find({})]
        except PyMongoError as e:
            raise handle_database_error(e, "Failed to fetch all requests") from e

    def find_by_reg_number(self, reg_number: str) -> Optional[dict]:
        try:
            return serialize(self.collection.find_one({"regNumber": reg_number}))
        except PyMongoError as e:
            raise handle_database_error(e, "Failed to fetch request status") from e

    def update_status(self, request_id: str, expected_status: str, fields: dict) -> Optional[dict]:
        """
        Returns the updated document, or None when the request does not
        exist or is no longer in `expected_status`.
        """
        oid = to_object_id(request_id)
        if oid is None:
            return None
        try:
            updated = self.collection.find_one_and_update(
                {"_id": oid, "status": expected_status},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise handle_database_error(e, "Failed to update request") from e
        return serialize(updated)
