"""Page windows and cache lifetimes for the epochs and slots listings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

MAX_PAGE_SIZE = 100
SLOTS_AHEAD = 8


@dataclass
class PageWindow:
    """Position of one page in a listing that runs from ``newest`` down to 0.

    Pages are numbered from 1 at the newest end.  ``first`` and ``last`` are
    the newest and oldest entries shown on the page.  Fields of the ``*_first``
    kind hold the newest entry of that page.
    """

    page_size: int
    newest: int
    first: int
    last: int
    total_pages: int
    current_page_index: int
    current_page_first: int
    prev_page_index: int
    prev_page_first: int
    next_page_index: int = 0
    next_page_first: int = 0
    last_page_first: int = 0
    is_default_page: bool = False

    @property
    def count(self) -> int:
        """Number of entries on the page."""
        return self.first - self.last + 1


def _ceil_div(value: int, divisor: int) -> int:
    return -(-value // divisor)


def _window(first: int, page_size: int, newest: int) -> PageWindow:
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    if first < 0:
        raise ValueError("first entry must not be negative")
    is_default = False
    if first > newest:
        is_default = True
        first = newest
    page_size = min(page_size, MAX_PAGE_SIZE)

    pages_before = _ceil_div(first + 1, page_size)
    pages_after = _ceil_div(newest - first, page_size)
    current_index = pages_after + 1
    window = PageWindow(
        page_size=page_size,
        newest=newest,
        first=first,
        last=first - (page_size - 1) if first > page_size - 1 else 0,
        total_pages=pages_before + pages_after,
        current_page_index=current_index,
        current_page_first=first,
        prev_page_index=current_index - 1,
        prev_page_first=first + page_size,
        last_page_first=page_size - 1,
        is_default_page=is_default,
    )
    if first >= page_size:
        window.next_page_index = current_index + 1
        window.next_page_first = first - page_size
    return window


def epochs_page(first_epoch: int, page_size: int, current_epoch: int) -> PageWindow:
    """Window of the epochs listing starting at ``first_epoch``.

    A start past the current epoch shows the default (newest) page.
    """
    return _window(first_epoch, page_size, max(current_epoch, 0))


def slots_page(
    first_slot: int, page_size: int, current_slot: int, slots_per_epoch: int
) -> PageWindow:
    """Window of the slots listing starting at ``first_slot``.

    The listing reaches up to eight slots ahead of the current one, but not
    past the end of the current epoch.
    """
    if slots_per_epoch <= 0:
        raise ValueError("slots_per_epoch must be positive")
    if current_slot < 0:
        raise ValueError("current_slot must not be negative")
    current_epoch = current_slot // slots_per_epoch
    epoch_end = (current_epoch + 1) * slots_per_epoch
    max_slot = current_slot + SLOTS_AHEAD
    if max_slot >= epoch_end:
        max_slot = epoch_end - 1
    return _window(first_slot, page_size, max_slot)


def epochs_cache_timeout(
    all_synchronized: bool, all_finalized: bool, first_epoch: int, current_epoch: int
) -> timedelta:
    """How long a rendered epochs page may be cached."""
    if not all_synchronized:
        return timedelta(seconds=30)
    if all_finalized:
        return timedelta(minutes=30)
    if first_epoch + 2 < current_epoch:
        return timedelta(minutes=10)
    return timedelta(seconds=12)


def slots_cache_timeout(
    all_synchronized: bool, all_finalized: bool, first_epoch: int, current_epoch: int
) -> timedelta:
    """How long a rendered slots page may be cached."""
    if not all_synchronized:
        return timedelta(seconds=30)
    if all_finalized:
        return timedelta(minutes=30)
    if first_epoch < current_epoch:
        return timedelta(minutes=10)
    return timedelta(seconds=12)


__all__ = [
    "PageWindow",
    "epochs_page",
    "slots_page",
    "epochs_cache_timeout",
    "slots_cache_timeout",
]