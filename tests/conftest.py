import itertools
from datetime import datetime, timezone

import pytest


class FakeStore:
    """In-memory stand-in for firestore_utils / mongo_utils."""

    def __init__(self):
        self.collections = {}
        self.commits = []
        self.inserts = 0
        self.fail_delete = False
        self.fail_insert = False
        self._ids = itertools.count(1)

    def add(self, collection_name, data):
        doc_id = f"doc-{next(self._ids)}"
        self.collections.setdefault(collection_name, {})[doc_id] = dict(data)
        return doc_id

    def list_documents(self, collection_name):
        return list(self.collections.get(collection_name, {}))

    def batch_delete(self, collection_name, refs):
        refs = list(refs)
        if self.fail_delete:
            raise RuntimeError("batch commit failed")
        docs = self.collections.get(collection_name, {})
        for ref in refs:
            docs.pop(ref, None)
        self.commits.append(refs)
        return len(refs)

    def insert_document(self, collection_name, data, server_timestamps=()):
        self.inserts += 1
        if self.fail_insert:
            raise RuntimeError("insert failed")
        doc = dict(data)
        now = datetime.now(timezone.utc)
        for field in server_timestamps:
            doc[field] = now
        return self.add(collection_name, doc)


@pytest.fixture
def store():
    return FakeStore()
