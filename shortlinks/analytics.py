"""Best-effort visit tracking for resolved short links.

Visit tracking must never degrade redirects. Both operations therefore catch
every error, including a bad timezone, and hand it back inside a VisitUpdate
instead of raising; the caller decides how to log it.

Functions:
    increment_total(dao, code) -> VisitUpdate
        Add 1 to the link's running visit total.
    increment_for_today(dao, code, timezone=VISITS_TIMEZONE) -> VisitUpdate
        Add 1 to the link's visit count for today's date in `timezone`.

Example:
    >>> update = increment_total(dao, 'abc123')
    >>> update.ok, update.value
    (True, 6)
    >>> update = increment_for_today(broken_dao, 'abc123')
    >>> update.ok
    False
    >>> update.error
    DataStoreError("DynamoDB request on table short-links failed: ...")
"""

import logging
from dataclasses import dataclass

from shortlinks.constants import VISITS_TIMEZONE
from shortlinks.dao.base import ShortLinkBaseDAO
from shortlinks.utils.helpers import today_in_timezone


logger = logging.getLogger(__name__)

TOTAL_VISITS = 'total_visits'
VISITS_BY_DATE = 'visits_by_date'


@dataclass(frozen=True)
class VisitUpdate:
    """Outcome of a single visit counter update.

    Attributes:
        operation (str):
            Which counter was updated (TOTAL_VISITS or VISITS_BY_DATE).
        code (str):
            Code of the visited short link.
        value (int | None):
            Counter value after the increment, None on failure.
        day (str | None):
            Date bucket for VISITS_BY_DATE updates.
        error (Exception | None):
            Error raised by the data store, None on success.
    """

    operation: str
    code: str
    value: int | None = None
    day: str | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def increment_total(dao: ShortLinkBaseDAO, code: str) -> VisitUpdate:
    logger.debug('Incrementing visit counter.', extra={'code': code})
    try:
        total = dao.increment_total(code)
    except Exception as e:
        return VisitUpdate(operation=TOTAL_VISITS, code=code, error=e)

    logger.debug('Incremented visit counter.', extra={'code': code, 'totalVisits': total})
    return VisitUpdate(operation=TOTAL_VISITS, code=code, value=total)


def increment_for_today(dao: ShortLinkBaseDAO, code: str, timezone: str = VISITS_TIMEZONE) -> VisitUpdate:
    day = None
    try:
        day = today_in_timezone(timezone)
        logger.debug('Incrementing visits by date.', extra={'code': code, 'day': day, 'timezone': timezone})
        visits = dao.increment_visits_by_date(code, day)
    except Exception as e:
        return VisitUpdate(operation=VISITS_BY_DATE, code=code, day=day, error=e)

    logger.debug('Incremented visits by date.', extra={'code': code, 'day': day, 'visits': visits})
    return VisitUpdate(operation=VISITS_BY_DATE, code=code, value=visits, day=day)
