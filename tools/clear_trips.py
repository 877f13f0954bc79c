#!/usr/bin/env python3
import os
import sys

# Ensure project root is on sys.path so we can import setup_trips
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from setup_trips import DB_BACKEND, TRIPS_COLLECTION, get_store, clear_trips_collection

if __name__ == "__main__":
    store = get_store(DB_BACKEND)
    clear_trips_collection(store, TRIPS_COLLECTION)
    print("Trips purge complete.")
