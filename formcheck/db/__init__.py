"""Persistence layer for accepted submissions."""

from formcheck.db.database import get_db, close_db
from formcheck.db.storage import StoragePort, InMemoryStorage, SqliteStorage
from formcheck.db.stores import SubmissionStore
