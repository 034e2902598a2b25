import pytest

from beaconexplorer.validators import (
    describe_status,
    offset_page,
    validators_page,
    withdraw_address,
)


@pytest.mark.parametrize(
    "status, expected",
    [
        ("pending_initialized", ("Pending", False)),
        ("pending_queued", ("Pending", False)),
        ("active_ongoing", ("Active", True)),
        ("active_exiting", ("Exiting", True)),
        ("active_slashed", ("Slashed", True)),
        ("exited_unslashed", ("Exited", False)),
        ("exited_slashed", ("Slashed", False)),
    ],
)
def test_describe_status(status, expected):
    assert describe_status(status) == expected


def test_unknown_status_is_shown_unchanged():
    assert describe_status("withdrawal_done") == ("withdrawal_done", False)


def test_withdraw_address_for_eth1_credentials():
    address = bytes(range(20))
    credentials = bytes([0x01]) + bytes(11) + address
    assert withdraw_address(credentials) == address


def test_withdraw_address_for_bls_credentials():
    assert withdraw_address(bytes(32)) is None


def test_withdraw_address_rejects_empty():
    with pytest.raises(ValueError):
        withdraw_address(b"")


def test_first_page_is_default():
    window = validators_page(0, 50, 1000)
    assert window.is_default_page is True
    assert window.first_validator == 0
    assert window.last_validator == 50
    assert window.current_page_index == 1
    assert window.prev_page_index == 0
    assert window.next_page_val_idx == 50


def test_start_past_end_is_clamped():
    window = validators_page(10_000, 50, 120)
    assert window.is_default_page is False
    assert window.first_validator == 120
    assert window.count == 0
    assert list(window.indices) == []


def test_page_size_is_capped():
    window = validators_page(0, 500, 1000)
    assert window.page_size == 100
    assert window.count == 100


def test_middle_page_links():
    window = validators_page(50, 50, 500)
    assert window.prev_page_val_idx == 0
    assert window.prev_page_index == window.current_page_index - 1
    assert window.next_page_val_idx == 100
    assert window.next_page_index == window.current_page_index + 1


def test_last_page_offset_never_negative():
    window = validators_page(0, 50, 10)
    assert window.last_page_val_idx == 0
    assert window.last_validator == 10


@pytest.mark.parametrize("first", [0, 1, 49, 50, 99, 333, 999])
@pytest.mark.parametrize("size", [1, 7, 50, 100])
def test_window_invariants(first, size):
    total = 999
    window = validators_page(first, size, total)
    assert 0 <= window.count <= window.page_size
    assert window.last_validator <= total
    assert 1 <= window.current_page_index <= window.total_pages + 1
    assert window.total_pages * window.page_size >= total


def test_invalid_page_size():
    with pytest.raises(ValueError):
        validators_page(0, 0, 10)


def test_offset_first_page():
    window = offset_page(0, 50, False)
    assert window.is_default_page is True
    assert window.total_pages == 1
    assert window.current_page_index == 1
    assert window.prev_page_index == 0
    assert window.has_next is False


def test_offset_page_with_more():
    window = offset_page(3, 50, True)
    assert window.is_default_page is False
    assert window.current_page_offset == 3
    assert window.prev_page_index == 3
    assert window.prev_page_offset == 2
    assert window.next_page_offset == 4
    assert window.total_pages == window.current_page_index + 1
    assert window.has_next is True


def test_offset_page_caps_size():
    assert offset_page(0, 1000, False).page_size == 100


def test_offset_page_rejects_negative_index():
    with pytest.raises(ValueError):
        offset_page(-1, 50, False)