import os
import firebase_admin
from firebase_admin import credentials, firestore
from typing import Any, Dict, Iterable, List

FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS", "serviceAccountKey.json")

_db = None

def _get_db():
    """Initialise the Firebase Admin app once and return the Firestore client."""
    global _db
    if _db is None:
        if not firebase_admin._apps:
            cred = credentials.Certificate(FIREBASE_CREDENTIALS)
            firebase_admin.initialize_app(cred)
        _db = firestore.client()
    return _db

def list_documents(collection_name: str) -> List[Any]:
    """Return references to every document in the collection."""
    db = _get_db()
    return [doc.reference for doc in db.collection(collection_name).stream()]

def batch_delete(collection_name: str, refs: Iterable[Any]) -> int:
    """Delete the given document references in a single batch commit.

    Firestore references carry their own path, so collection_name is only
    accepted to match the mongo_utils signature.
    """
    db = _get_db()
    batch = db.batch()
    count = 0
    for ref in refs:
        batch.delete(ref)
        count += 1
    batch.commit()
    return count

def insert_document(collection_name: str, data: Dict[str, Any], server_timestamps: Iterable[str] = ()) -> str:
    """Add a document with a generated id; fields in server_timestamps get the commit time."""
    db = _get_db()
    doc = dict(data)
    for field in server_timestamps:
        doc[field] = firestore.SERVER_TIMESTAMP
    _, ref = db.collection(collection_name).add(doc)
    return ref.id
