import base64
from typing import Any, Iterable, Mapping

from .schemas.appointment import AppointmentStats, AppointmentStatus


def decode_base64(encoded: str) -> bytes:
    """Strict base64 decoding, raises ValueError on malformed input."""
    return base64.b64decode(encoded, validate=True)


def aggregate_appointments(documents: Iterable[Mapping[str, Any]]) -> AppointmentStats:
    documents = list(documents)

    counts = {appointment_status: 0 for appointment_status in AppointmentStatus}

    for document in documents:
        try:
            appointment_status = AppointmentStatus(document.get("status"))
        except ValueError:
            continue

        counts[appointment_status] += 1

    return AppointmentStats(
        total_count=len(documents),
        scheduled_count=counts[AppointmentStatus.scheduled],
        pending_count=counts[AppointmentStatus.pending],
        cancelled_count=counts[AppointmentStatus.cancelled],
        documents=documents,
    )
