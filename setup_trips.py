import sys
import argparse
import os

from trips import build_sample_trip, SERVER_TIMESTAMP_FIELDS

# -------- CONFIG --------
TRIPS_COLLECTION = os.getenv("TRIPS_COLLECTION", "trips")
DB_BACKEND = os.getenv("DB_BACKEND", "firestore")  # "firestore" or "mongo"

BACKENDS = ("firestore", "mongo")


def get_store(backend: str):
    """Return the storage module for the given backend name."""
    if backend == "firestore":
        import firestore_utils
        return firestore_utils
    if backend == "mongo":
        import mongo_utils
        return mongo_utils
    raise ValueError(f"Unknown backend {backend!r}; expected one of {', '.join(BACKENDS)}")


def clear_trips_collection(store, collection_name: str = TRIPS_COLLECTION) -> int:
    """Delete every document in the trips collection as one batch."""
    refs = store.list_documents(collection_name)

    print("Deleting existing trips...")

    if not refs:
        print("No existing trip documents found")
        return 0

    deleted = store.batch_delete(collection_name, refs)
    print(f"Deleted {deleted} trip documents")
    return deleted


def setup_trips_collection(store, collection_name: str = TRIPS_COLLECTION) -> str:
    """Insert the sample trip document and return its id."""
    doc_id = store.insert_document(
        collection_name,
        build_sample_trip(),
        server_timestamps=SERVER_TIMESTAMP_FIELDS,
    )
    print("Created sample trip document")
    return doc_id


def run(store, collection_name: str = TRIPS_COLLECTION) -> bool:
    """Reset the collection, then seed it. Returns False if either step failed."""
    try:
        clear_trips_collection(store, collection_name)
        setup_trips_collection(store, collection_name)
        print("Trip collection setup completed successfully")
        return True
    except Exception as e:
        print(f"Error setting up trips collection: {e!r}", file=sys.stderr)
        return False


def main(backend: str = DB_BACKEND, collection_name: str = TRIPS_COLLECTION):
    print(f"Backend: {backend}  Collection: {collection_name}")
    try:
        run(get_store(backend), collection_name)
    except Exception as e:
        # backend construction failed before the reset started
        print(f"Error setting up trips collection: {e!r}", file=sys.stderr)
    finally:
        sys.exit()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Reset the trips collection and insert a sample trip")
    parser.add_argument("--backend", choices=BACKENDS, default=DB_BACKEND, help="Database backend to use")
    parser.add_argument("--collection", default=TRIPS_COLLECTION, help="Collection to reset and seed")
    args = parser.parse_args()

    main(backend=args.backend, collection_name=args.collection)
