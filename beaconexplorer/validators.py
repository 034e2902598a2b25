"""Status labels and page windows for the validator listings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

MAX_PAGE_SIZE = 100
ETH1_CREDENTIALS_PREFIX = 0x01
WITHDRAW_ADDRESS_OFFSET = 12

_STATUS_LABELS = {
    "active_ongoing": ("Active", True),
    "active_exiting": ("Exiting", True),
    "active_slashed": ("Slashed", True),
    "exited_unslashed": ("Exited", False),
    "exited_slashed": ("Slashed", False),
}


def describe_status(status: str) -> Tuple[str, bool]:
    """Display label for a beacon validator status and whether it is active.

    Any ``pending*`` status is shown as "Pending"; unknown statuses are shown
    as they are.
    """
    if status.startswith("pending"):
        return "Pending", False
    return _STATUS_LABELS.get(status, (status, False))


def withdraw_address(credentials: bytes) -> Optional[bytes]:
    """Execution address of 0x01 withdrawal credentials, else None."""
    credentials = bytes(credentials)
    if not credentials:
        raise ValueError("withdrawal credentials must not be empty")
    if credentials[0] != ETH1_CREDENTIALS_PREFIX:
        return None
    return credentials[WITHDRAW_ADDRESS_OFFSET:]


def _ceil_div(value: int, divisor: int) -> int:
    return -(-value // divisor)


@dataclass
class ValidatorsWindow:
    """One page of the validator set, from ``first_validator`` up to, not
    including, ``last_validator``.  Pages are numbered from 1."""

    page_size: int
    total_count: int
    first_validator: int
    last_validator: int
    total_pages: int
    current_page_index: int
    current_page_val_idx: int
    prev_page_index: int = 0
    prev_page_val_idx: int = 0
    next_page_index: int = 0
    next_page_val_idx: int = 0
    last_page_val_idx: int = 0
    is_default_page: bool = False

    @property
    def count(self) -> int:
        """Number of validators on the page."""
        return self.last_validator - self.first_validator

    @property
    def indices(self) -> range:
        """Positions in the validator set shown on the page."""
        return range(self.first_validator, self.last_validator)


def validators_page(first_index: int, page_size: int, total_count: int) -> ValidatorsWindow:
    """Window of the validators listing starting at ``first_index``."""
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    if first_index < 0 or total_count < 0:
        raise ValueError("indices and counts must not be negative")

    is_default = False
    if first_index == 0:
        is_default = True
    elif first_index > total_count:
        first_index = total_count
    page_size = min(page_size, MAX_PAGE_SIZE)

    pages_before = _ceil_div(first_index, page_size)
    pages_after = _ceil_div(total_count - first_index, page_size)
    current_index = pages_before + 1
    window = ValidatorsWindow(
        page_size=page_size,
        total_count=total_count,
        first_validator=first_index,
        last_validator=min(first_index + page_size, total_count),
        total_pages=pages_before + pages_after,
        current_page_index=current_index,
        current_page_val_idx=first_index,
        last_page_val_idx=max(total_count - page_size, 0),
        is_default_page=is_default,
    )
    if pages_before > 0:
        window.prev_page_index = current_index - 1
        window.prev_page_val_idx = max(first_index - page_size, 0)
    if pages_after > 1:
        window.next_page_index = current_index + 1
        window.next_page_val_idx = first_index + page_size
    return window


@dataclass
class OffsetWindow:
    """Page of a listing addressed by page number, with unknown length.

    Offsets count pages from 0; indexes count them from 1.  A following
    page exists only when the query returned more rows than fit.
    """

    page_size: int
    total_pages: int
    current_page_index: int
    current_page_offset: int
    prev_page_index: int = 0
    prev_page_offset: int = 0
    next_page_index: int = 0
    next_page_offset: int = 0
    last_page_offset: int = 0
    is_default_page: bool = False

    @property
    def has_next(self) -> bool:
        return self.next_page_index > 0


def offset_page(page_idx: int, page_size: int, have_more: bool) -> OffsetWindow:
    """Window for page ``page_idx`` of a filtered listing."""
    if page_idx < 0:
        raise ValueError("page index must not be negative")
    if page_size < 0:
        raise ValueError("page_size must not be negative")
    window = OffsetWindow(
        page_size=min(page_size, MAX_PAGE_SIZE),
        total_pages=page_idx + 1,
        current_page_index=page_idx + 1,
        current_page_offset=page_idx,
        is_default_page=page_idx == 0,
    )
    if page_idx >= 1:
        window.prev_page_index = page_idx
        window.prev_page_offset = page_idx - 1
    if have_more:
        window.next_page_index = page_idx + 1
        window.next_page_offset = page_idx + 1
        window.total_pages += 1
    return window


__all__ = [
    "ValidatorsWindow",
    "OffsetWindow",
    "describe_status",
    "withdraw_address",
    "validators_page",
    "offset_page",
]