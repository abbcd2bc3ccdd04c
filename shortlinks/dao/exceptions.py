"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortLinkNotFoundError:
        Raised when a short link is not found in the data store, or the stored
        record has no redirect target.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, throttling, etc.).

Example:
    >>> from shortlinks.dao.exceptions import ShortLinkNotFoundError
    >>> raise ShortLinkNotFoundError("Short link with code 'abc123' not found.")
    Traceback (most recent call last):
        ...
    shortlinks.dao.exceptions.ShortLinkNotFoundError: Short link with code 'abc123' not found.
"""

from shortlinks.exceptions import ShortLinksError


class DAOError(ShortLinksError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortLinkNotFoundError(DAOError):
    """Exception raised when a short link is not found in the data store."""

    error_code = 'dao:short_link_not_found_error'


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, throttling, etc.
    """

    error_code = 'dao:data_store_error'
