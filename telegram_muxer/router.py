import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional

from .errors import InvalidPatternError
from .events import MEDIA_CATEGORIES, Category
from .patterns import compile_command, try_compile


logger = logging.getLogger(__name__)


class RouteKind(str, Enum):
    PATTERN = "pattern"  # text, handler gets the capture groups
    TEXT = "text"  # text, handler gets the raw text only
    MEDIA = "media"
    ANY_SOUND = "any_sound"  # audio or voice
    OBSERVER = "observer"  # every event, before anything else


@dataclass(frozen=True, slots=True)
class Route:
    kind: RouteKind
    handler: Callable
    matcher: Optional[re.Pattern] = None
    category: Optional[Category] = None
    pattern: Optional[str] = None  # source text, e.g. "echo (.+)"
    name: Optional[str] = None

    @property
    def label(self) -> str:
        if self.name:
            return self.name
        return getattr(self.handler, "__qualname__", repr(self.handler))

    def matches(self, text: str) -> Optional[re.Match]:
        if self.matcher is None:
            return None
        return self.matcher.search(text)


class Router:
    """Ordered route registry. Insertion order is dispatch order.

    ``username`` is the bot username used to expand command shorthands; with
    ``strict`` an invalid pattern raises instead of being dropped.
    """

    def __init__(self, username: str = "", strict: bool = False):
        self.username = username
        self.strict = strict
        self._routes: List[Route] = []

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self.all_routes())

    def add(self, route: Route) -> Route:
        self._routes.append(route)
        return route

    def all_routes(self) -> List[Route]:
        return list(self._routes)

    def _add_text(
        self,
        kind: RouteKind,
        source: str,
        expression: str,
        handler: Callable,
        name: Optional[str],
    ) -> Optional[Route]:
        matcher, reason = try_compile(expression)
        if matcher is None:
            if self.strict:
                raise InvalidPatternError(source, reason)
            logger.warning(
                "Route %s not registered: invalid pattern %r (%s)",
                name or source,
                expression,
                reason,
            )
            return None
        return self.add(Route(kind, handler, matcher=matcher, pattern=source, name=name))

    def command(
        self, pattern: str, handler: Callable, name: Optional[str] = None
    ) -> Optional[Route]:
        """Command route, handler called as ``handler(bot, event, text, captures)``."""
        expression = compile_command(pattern, self.username)
        return self._add_text(RouteKind.PATTERN, pattern, expression, handler, name)

    def simple_command(
        self, pattern: str, handler: Callable, name: Optional[str] = None
    ) -> Optional[Route]:
        """Command route, handler called as ``handler(bot, event, text)``."""
        expression = compile_command(pattern, self.username)
        return self._add_text(RouteKind.TEXT, pattern, expression, handler, name)

    def regex(
        self, pattern: str, handler: Callable, name: Optional[str] = None
    ) -> Optional[Route]:
        """Free regular expression route with capture groups, used as written."""
        return self._add_text(RouteKind.PATTERN, pattern, pattern, handler, name)

    def simple_regex(
        self, pattern: str, handler: Callable, name: Optional[str] = None
    ) -> Optional[Route]:
        return self._add_text(RouteKind.TEXT, pattern, pattern, handler, name)

    def observer(self, handler: Callable, name: Optional[str] = None) -> Route:
        return self.add(Route(RouteKind.OBSERVER, handler, name=name))

    def media(
        self, category: Category, handler: Callable, name: Optional[str] = None
    ) -> Route:
        category = Category(category)
        if category not in MEDIA_CATEGORIES:
            raise ValueError(f"{category.value!r} is not a media category")
        return self.add(Route(RouteKind.MEDIA, handler, category=category, name=name))

    def any_sound(self, handler: Callable, name: Optional[str] = None) -> Route:
        return self.add(Route(RouteKind.ANY_SOUND, handler, name=name))
