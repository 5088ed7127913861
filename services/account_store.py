# services/account_store.py

from typing import Optional

from bson import ObjectId
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from core.database import USERS_COLLECTION
from core.errors import DuplicateEmail, handle_database_error


class AccountStore:
    """Accounts collection. Create and look up only; accounts are never updated."""

    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION]

    def create_account(self, username: str, email: str, password_hash: str, role: str) -> dict:
        if self.find_by_email(email) is not None:
            raise DuplicateEmail()

        account = {
            "username": username,
            "email": email,
            "password": password_hash,
            "role": role,
        }
        try:
            result = self.collection.insert_one(account)
        except DuplicateKeyError:
            # lost a race with a concurrent signup for the same email
            raise DuplicateEmail()
        except PyMongoError as e:
            raise handle_database_error(e, "Signup failed") from e

        account["_id"] = result.inserted_id
        return account

    def find_by_email(self, email: str) -> Optional[dict]:
        try:
            return self.collection.find_one({"email": email})
        except PyMongoError as e:
            raise handle_database_error(e, "Account lookup failed") from e

    def find_by_id(self, account_id: str) -> Optional[dict]:
        if not ObjectId.is_valid(account_id):
            return None
        try:
            return self.collection.find_one({"_id": ObjectId(account_id)})
        except PyMongoError as e:
            raise handle_database_error(e, "Account lookup failed") from e
