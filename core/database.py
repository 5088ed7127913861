# core/database.py

from threading import Lock
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from core.config import settings
from core.errors import GenericFailure
from core.logging_config import logger


USERS_COLLECTION = "users"
FEE_REQUESTS_COLLECTION = "feerequests"


def ensure_indexes(db: Database) -> None:
    """Unique email on accounts; regNumber lookup on fee requests."""
    db[USERS_COLLECTION].create_index([("email", ASCENDING)], unique=True)
    db[FEE_REQUESTS_COLLECTION].create_index([("regNumber", ASCENDING)])
    db[FEE_REQUESTS_COLLECTION].create_index([("status", ASCENDING)])


# ============================================================
# Process-wide MongoDB connection (lazy, idempotent)
# ============================================================
class MongoConnection:
    """
    Owns the MongoClient for the whole process.

    The first call to `get_database()` connects, pings the server and
    creates indexes; later calls reuse the same handle. A failed connect
    leaves the object unconnected so the next request retries.
    """

    def __init__(self, uri: str, timeout_ms: int = 5000, default_db: str = "feeportal"):
        self.uri = uri
        self.timeout_ms = timeout_ms
        self.default_db = default_db
        self._client: Optional[MongoClient] = None
        self._db: Optional[Database] = None
        self._lock = Lock()

    @property
    def connected(self) -> bool:
        return self._db is not None

    def connect(self) -> Database:
        with self._lock:
            if self._db is not None:
                return self._db

            client = MongoClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
            try:
                client.admin.command("ping")
                db = client.get_default_database(default=self.default_db)
                ensure_indexes(db)
            except PyMongoError as e:
                client.close()
                logger.error(f"MongoDB connection error: {e}")
                raise GenericFailure("Database unavailable") from e

            self._client = client
            self._db = db
            logger.info(f"MongoDB connected (database '{db.name}')")
            return db

    def get_database(self) -> Database:
        if self._db is not None:
            return self._db
        return self.connect()

    def ping(self) -> dict:
        """Connectivity check for the health router."""
        try:
            db = self.get_database()
            db.command("ping")
            return {"status": "ok", "database": db.name}
        except GenericFailure as e:
            return {"status": "error", "detail": e.message}
        except PyMongoError as e:
            logger.error(f"MongoDB ping error: {e}")
            return {"status": "error", "detail": "Database ping failed"}

    def close(self) -> None:
        with self._lock:
            if self._client is not None:
                self._client.close()
                logger.info("MongoDB connection closed")
            self._client = None
            self._db = None


mongo = MongoConnection(
    settings.MONGODB_URI,
    timeout_ms=settings.MONGODB_TIMEOUT_MS,
    default_db=settings.MONGODB_DEFAULT_DB,
)


def get_database() -> Database:
    """FastAPI dependency: the shared database handle."""
    return mongo.get_database()
