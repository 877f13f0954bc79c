from pymongo import MongoClient
from bson import ObjectId
import os
from typing import Any, Dict, Iterable, List

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "trips_app")

_client = None
_db = None

def _get_client():
    global _client
    if _client is None:
        _client = MongoClient(MONGO_URI)
    return _client

def _get_db():
    global _db
    if _db is None:
        _db = _get_client()[DB_NAME]
    return _db

def list_documents(collection_name: str) -> List[Any]:
    """Return the _id of every document in the collection."""
    collection = _get_db()[collection_name]
    return [doc["_id"] for doc in collection.find({}, projection={"_id": 1})]

def batch_delete(collection_name: str, refs: Iterable[Any]) -> int:
    """Delete the given ids inside one transaction, so either all go or none do.

    Transactions need a replica set or sharded cluster.
    """
    collection = _get_db()[collection_name]
    ids = list(refs)
    with _get_client().start_session() as session:
        result = session.with_transaction(
            lambda s: collection.delete_many({"_id": {"$in": ids}}, session=s)
        )
    return result.deleted_count

def insert_document(collection_name: str, data: Dict[str, Any], server_timestamps: Iterable[str] = ()) -> str:
    """Insert a document under a fresh ObjectId.

    Upserting with $currentDate lets the server set the timestamp fields in
    the same write as the data.
    """
    collection = _get_db()[collection_name]
    doc_id = ObjectId()
    update = {"$set": dict(data)}
    fields = list(server_timestamps)
    if fields:
        update["$currentDate"] = {field: True for field in fields}
    collection.update_one({"_id": doc_id}, update, upsert=True)
    return str(doc_id)
