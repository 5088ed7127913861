from fastapi import Depends
from pymongo.database import Database

from core.database import get_database
from services.account_store import AccountStore
from services.credential_service import CredentialService
from services.fee_request_store import FeeRequestStore
from services.workflow import WorkflowEngine


def get_account_store(db: Database = Depends(get_database)) -> AccountStore:
    return AccountStore(db)


def get_credential_service(accounts: AccountStore = Depends(get_account_store)) -> CredentialService:
    return CredentialService(accounts)


def get_workflow(db: Database = Depends(get_database)) -> WorkflowEngine:
    return WorkflowEngine(FeeRequestStore(db))
