"""Declarative route tables.

An application lists its routes once, before the bot username is known::

    urlpatterns = [
        path("echo (.+)", views.EchoView.as_handler(), name="echo"),
        media(Category.PHOTO, views.PhotoView.as_handler()),
    ]

and the bot registers them when it starts (see ``MuxBot.include``).
"""
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .events import Category
from .router import Router, RouteKind


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RouteSpec:
    kind: RouteKind
    handler: Callable
    pattern: Optional[str] = None
    category: Optional[Category] = None
    name: Optional[str] = None
    command: bool = False  # expand ``pattern`` as a command shorthand


def path(pattern: str, handler: Callable, name: Optional[str] = None) -> RouteSpec:
    """Command with capture groups, e.g. ``path("echo (.+)", handler)``."""
    return RouteSpec(RouteKind.PATTERN, handler, pattern, name=name, command=True)


def simple_path(pattern: str, handler: Callable, name: Optional[str] = None) -> RouteSpec:
    return RouteSpec(RouteKind.TEXT, handler, pattern, name=name, command=True)


def re_path(pattern: str, handler: Callable, name: Optional[str] = None) -> RouteSpec:
    """Free regular expression with capture groups."""
    return RouteSpec(RouteKind.PATTERN, handler, pattern, name=name)


def simple_re_path(pattern: str, handler: Callable, name: Optional[str] = None) -> RouteSpec:
    return RouteSpec(RouteKind.TEXT, handler, pattern, name=name)


def observe(handler: Callable, name: Optional[str] = None) -> RouteSpec:
    """Handler called for every message."""
    return RouteSpec(RouteKind.OBSERVER, handler, name=name)


def media(category: Category, handler: Callable, name: Optional[str] = None) -> RouteSpec:
    return RouteSpec(RouteKind.MEDIA, handler, category=Category(category), name=name)


def any_sound(handler: Callable, name: Optional[str] = None) -> RouteSpec:
    return RouteSpec(RouteKind.ANY_SOUND, handler, name=name)


def register_route(router: Router, entry: RouteSpec):
    if entry.kind is RouteKind.PATTERN:
        add = router.command if entry.command else router.regex
        return add(entry.pattern, entry.handler, entry.name)
    if entry.kind is RouteKind.TEXT:
        add = router.simple_command if entry.command else router.simple_regex
        return add(entry.pattern, entry.handler, entry.name)
    if entry.kind is RouteKind.MEDIA:
        return router.media(entry.category, entry.handler, entry.name)
    if entry.kind is RouteKind.ANY_SOUND:
        return router.any_sound(entry.handler, entry.name)
    return router.observer(entry.handler, entry.name)


def register_routes(router: Router, urlpatterns: Iterable[RouteSpec]) -> int:
    """Register ``urlpatterns`` in order; returns how many routes were added."""
    added = 0
    for entry in urlpatterns:
        if register_route(router, entry) is not None:
            added += 1
    logger.info("Registered %d route(s) on router for @%s", added, router.username)
    return added
