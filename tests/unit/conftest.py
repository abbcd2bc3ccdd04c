import threading

import pytest

from shortlinks.models import ShortLinkModel
from shortlinks.dao.base import ShortLinkBaseDAO
from shortlinks.dao.exceptions import ShortLinkNotFoundError


class InMemoryShortLinkDAO(ShortLinkBaseDAO):
    """Thread-safe in-memory stand-in for a short link data store.

    Records are plain dicts using the store attribute names:
        {'originalUrl': str, 'totalVisits': int, 'visitsByDate': {day: int}}

    Every call is appended to `calls` so tests can assert which store
    operations a request performed.
    """

    def __init__(self, records: dict[str, dict] | None = None):
        self.records = {code: dict(record) for code, record in (records or {}).items()}
        self.calls: list[tuple] = []
        self._lock = threading.Lock()

    def get(self, code: str, **kwargs) -> ShortLinkModel:
        with self._lock:
            self.calls.append(('get', code))
            record = self.records.get(code)
            if record is None or 'originalUrl' not in record:
                raise ShortLinkNotFoundError(f"Short link with code '{code}' not found.")
            visits_by_date = record.get('visitsByDate')
            return ShortLinkModel(
                code=code,
                original_url=record['originalUrl'],
                total_visits=record.get('totalVisits'),
                visits_by_date=None if visits_by_date is None else dict(visits_by_date),
            )

    def increment_total(self, code: str, **kwargs) -> int:
        with self._lock:
            self.calls.append(('increment_total', code))
            record = self.records.setdefault(code, {})
            record['totalVisits'] = record.get('totalVisits', 0) + 1
            return record['totalVisits']

    def increment_visits_by_date(self, code: str, day: str, **kwargs) -> int:
        with self._lock:
            self.calls.append(('increment_visits_by_date', code, day))
            visits = self.records.setdefault(code, {}).setdefault('visitsByDate', {})
            visits[day] = visits.get(day, 0) + 1
            return visits[day]

    @property
    def mutations(self) -> list[tuple]:
        return [call for call in self.calls if call[0] != 'get']


@pytest.fixture
def in_memory_dao() -> InMemoryShortLinkDAO:
    return InMemoryShortLinkDAO(
        {
            'abc': {'originalUrl': 'https://example.com'},
            'counted': {
                'originalUrl': 'https://example.com/counted',
                'totalVisits': 5,
                'visitsByDate': {'2025-10-13': 4, '2025-10-14': 1},
            },
            'no-target': {'totalVisits': 3},
        }
    )
