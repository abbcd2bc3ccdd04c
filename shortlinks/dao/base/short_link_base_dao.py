"""Abstract base class for short link data access objects (DAOs).

This class establishes a consistent contract for all short link DAO implementations,
whether backed by DynamoDB or by an in-memory store in tests.

Responsibilities:
    - Provide an interface for resolving a shortcode into a ShortLinkModel.
    - Provide atomic visit counters (running total and per-day histogram).
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from shortlinks.dao.dynamodb import ShortLinkDynamoDBDAO

        >>> dao = ShortLinkDynamoDBDAO(dynamodb_table_name='short-links')

        >>> link = dao.get('abc123')
        >>> print(link.original_url)
        https://example.com/blog/article-123

        >>> dao.increment_total('abc123')
        1
        >>> dao.increment_visits_by_date('abc123', '2025-10-15')
        1

NOTE:
    Records are created and their redirect targets maintained elsewhere. DAOs
    never write `originalUrl` and never delete records.
"""

from abc import ABC, abstractmethod

from shortlinks.models import ShortLinkModel


class ShortLinkBaseDAO(ABC):
    """Interface for short link data access objects (DAOs).

    Methods:
        get(code: str, **kwargs) -> ShortLinkModel:
            Retrieve a short link and its visit counters by code.
            Raises ShortLinkNotFoundError if the record does not exist or has no target URL.
            Raises DataStoreError on connection or read failure.

        increment_total(code: str, **kwargs) -> int:
            Atomically add 1 to the running visit total (starting from 0).
            Raises DataStoreError on connection or write failure.

        increment_visits_by_date(code: str, day: str, **kwargs) -> int:
            Atomically add 1 to the visit count of a single calendar day (starting from 0).
            Raises DataStoreError on connection or write failure.

    Subclassing:
        Datastore-specific implementations (e.g., ShortLinkDynamoDBDAO) must
        extend this class and implement all abstract methods.
    """

    @abstractmethod
    def get(self, code: str, **kwargs) -> ShortLinkModel:
        """Retrieve a ShortLinkModel from the data store by its code.

        Args:
            code (str):
                The code of the short link to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkModel: The short link and its visit counters.

        Raises:
            ShortLinkNotFoundError:
                If no record with the given code exists, or the record has no original URL.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def increment_total(self, code: str, **kwargs) -> int:
        """Increment the running visit total of a short link.

        Implementations must perform the increment atomically on the data store
        side, treating a missing counter as 0, so concurrent callers never lose
        an increment.

        Args:
            code (str):
                The code of the visited short link.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The visit total after the increment.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def increment_visits_by_date(self, code: str, day: str, **kwargs) -> int:
        """Increment the visit count of a short link for a single calendar day.

        Args:
            code (str):
                The code of the visited short link.

            day (str):
                Calendar day formatted as YYYY-MM-DD.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The visit count for `day` after the increment.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
