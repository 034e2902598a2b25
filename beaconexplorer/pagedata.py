"""Data shared by every rendered page: title, version, menu and language."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Tuple, Union

DEFAULT_LANGUAGE = "en-US"
RUSSIAN_LANGUAGE = "ru-RU"
LANGUAGE_COOKIE = "language"
HIDDEN_MENU_FOR = ("confirmation", "login", "register")


@dataclass
class NavigationLink:
    label: str
    path: str
    icon: str = ""


@dataclass
class NavigationGroup:
    links: List[NavigationLink] = field(default_factory=list)


@dataclass
class MainMenuItem:
    label: str
    is_active: bool = False
    groups: List[NavigationGroup] = field(default_factory=list)


def create_menu_items(active: str, is_mainnet: bool = False) -> List[MainMenuItem]:
    """Main menu for a page whose active section is ``active``.

    The menu is the same on every network; pages of the login flow get none.
    """
    if active in HIDDEN_MENU_FOR:
        return []
    return [
        MainMenuItem(
            label="Blockchain",
            is_active=active == "blockchain",
            groups=[
                NavigationGroup([
                    NavigationLink("Epochs", "/epochs", "fa-history"),
                    NavigationLink("Slots", "/slots", "fa-cube"),
                ]),
                NavigationGroup([
                    NavigationLink("Validators", "/validators", "fa-table"),
                ]),
                NavigationGroup([
                    NavigationLink("Clients", "/clients", "fa-server"),
                ]),
            ],
        )
    ]


def page_title(title: str, site_name: str, year: Optional[int] = None) -> str:
    """Full page title; the year defaults to the current one."""
    if year is None:
        year = datetime.datetime.now().year
    if not title:
        return f"{site_name} - {year}"
    return f"{title} - {site_name} - {year}"


def version_string(build_version: str, build_release: str = "") -> str:
    if not build_release:
        return f"git-{build_version}"
    return f"{build_release} (git-{build_version})"


def detect_language(
    accept_language: str = "",
    cookies: Union[Mapping[str, str], Iterable[Tuple[str, str]]] = (),
) -> str:
    """Page language from the Accept-Language header and the language cookie.

    A ``language`` cookie wins; otherwise a first preference mentioning
    Russian selects it, and anything else gives the default.
    """
    pairs = cookies.items() if isinstance(cookies, Mapping) else cookies
    for name, value in pairs:
        if name == LANGUAGE_COOKIE:
            return value
    first = (accept_language or "").split(",")[0]
    if "ru" in first or "RU" in first:
        return RUSSIAN_LANGUAGE
    return DEFAULT_LANGUAGE


__all__ = [
    "NavigationLink",
    "NavigationGroup",
    "MainMenuItem",
    "create_menu_items",
    "page_title",
    "version_string",
    "detect_language",
]