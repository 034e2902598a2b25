import datetime

import pytest

from beaconexplorer.pagedata import (
    MainMenuItem,
    create_menu_items,
    detect_language,
    page_title,
    version_string,
)


@pytest.mark.parametrize("active", ["confirmation", "login", "register"])
def test_menu_hidden_for_login_pages(active):
    assert create_menu_items(active, True) == []


def test_menu_marks_blockchain_active():
    items = create_menu_items("blockchain", False)
    assert len(items) == 1
    assert items[0].label == "Blockchain"
    assert items[0].is_active is True


def test_menu_inactive_for_other_section():
    items = create_menu_items("validators", True)
    assert items[0].is_active is False


def test_menu_links_in_order():
    items = create_menu_items("index", False)
    labels = [link.label for group in items[0].groups for link in group.links]
    paths = [link.path for group in items[0].groups for link in group.links]
    assert labels == ["Epochs", "Slots", "Validators", "Clients"]
    assert paths == ["/epochs", "/slots", "/validators", "/clients"]


def test_menu_same_on_every_network():
    assert create_menu_items("blockchain", True) == create_menu_items("blockchain", False)
    assert all(isinstance(item, MainMenuItem) for item in create_menu_items("x"))


def test_page_title_with_title():
    assert page_title("Slots", "Explorer", 2024) == "Slots - Explorer - 2024"


def test_page_title_without_title():
    assert page_title("", "Explorer", 2024) == "Explorer - 2024"


def test_page_title_defaults_to_current_year():
    assert page_title("", "Explorer").endswith(str(datetime.datetime.now().year))


def test_version_without_release():
    assert version_string("abc") == "git-abc"


def test_version_with_release():
    assert version_string("abc", "v1") == "v1 (git-abc)"


def test_language_default():
    assert detect_language("", {}) == "en-US"


def test_language_russian_first_preference():
    assert detect_language("ru,en;q=0.8", {}) == "ru-RU"
    assert detect_language("RU", []) == "ru-RU"


def test_language_russian_not_first():
    assert detect_language("en-US,ru", {}) == "en-US"


def test_language_cookie_wins():
    assert detect_language("ru", {"language": "de-DE"}) == "de-DE"
    assert detect_language("en", [("other", "x"), ("language", "fr-FR")]) == "fr-FR"