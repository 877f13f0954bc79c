from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any

TRIP_DURATION = timedelta(days=7)
SERVER_TIMESTAMP_FIELDS = ("createdAt", "updatedAt")

# Placeholders; replace with real group/user ids before using the data
SAMPLE_GROUP_ID = "sample-group-id"
SAMPLE_USER_ID = "sample-user-id"


def build_sample_trip(now: Optional[datetime] = None) -> Dict[str, Any]:
    """Build the sample trip document.

    createdAt/updatedAt are left out: the database sets them on write
    (see SERVER_TIMESTAMP_FIELDS).
    """
    start = now or datetime.now(timezone.utc)
    return {
        "name": "Sample Trip",
        "description": "This is a sample trip to demonstrate the structure",
        "groupId": SAMPLE_GROUP_ID,
        "createdBy": SAMPLE_USER_ID,
        "startDate": start,
        "endDate": start + TRIP_DURATION,
        "currency": "INR",
        "members": [SAMPLE_USER_ID],
    }
