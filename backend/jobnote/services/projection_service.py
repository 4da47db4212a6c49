from collections.abc import Iterable

from jobnote.schemas.job import ALL_STATUSES, JobRecord
from jobnote.services.due_date_service import effective_due_time

NO_APPLICATIONS = "No applications yet"
NO_MATCHES = "No results match your filters or search"


def _text(value) -> str:
    return "" if value is None else str(value)


def _haystack(record: JobRecord) -> str:
    return f"{_text(record.position)} {_text(record.company)} {_text(record.note)}".lower()


def project(
    records: Iterable[JobRecord],
    status_filter: str = ALL_STATUSES,
    search_query: str = "",
) -> list[JobRecord]:
    """Filter by status and search text, then order by due date.

    Records without a usable due date go last. ``sorted`` is stable, so ties
    keep their collection order.
    """
    visible = list(records)
    if status_filter != ALL_STATUSES:
        visible = [r for r in visible if r.status == status_filter]

    query = (search_query or "").strip().lower()
    if query:
        visible = [r for r in visible if query in _haystack(r)]

    return sorted(visible, key=lambda r: effective_due_time(r.due_date))


def empty_state_message(total: int, visible: int) -> str | None:
    if visible:
        return None
    return NO_APPLICATIONS if total == 0 else NO_MATCHES
