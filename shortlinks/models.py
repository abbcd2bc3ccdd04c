from dataclasses import dataclass


# fmt: off
@dataclass(frozen=True)
class ShortLinkModel:
    code: str                                   # Unique short identifier of the link
    original_url: str                           # Redirect target
    total_visits: int | None = None             # Running visit total, None until the first visit
    visits_by_date: dict[str, int] | None = None  # YYYY-MM-DD -> visits that day, None until the first visit
# fmt: on
