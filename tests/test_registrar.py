import pytest

from telegram_muxer.events import Category
from telegram_muxer.errors import InvalidPatternError
from telegram_muxer.registrar import (
    any_sound,
    media,
    observe,
    path,
    re_path,
    register_routes,
    simple_path,
    simple_re_path,
)
from telegram_muxer.router import Router, RouteKind


async def view(*args):
    return None


def test_urlpatterns_register_in_order():
    router = Router(username="rock")
    urlpatterns = [
        observe(view, name="log"),
        path("echo (.+)", view, name="echo"),
        simple_path("start", view, name="start"),
        re_path(r"^Tell me (.+)$", view, name="tell"),
        simple_re_path(r"^Hello!?$", view, name="hello"),
        media(Category.PHOTO, view, name="photo"),
        any_sound(view, name="sound"),
    ]

    assert register_routes(router, urlpatterns) == 7
    routes = router.all_routes()
    assert [r.name for r in routes] == ["log", "echo", "start", "tell", "hello", "photo", "sound"]
    assert [r.kind for r in routes] == [
        RouteKind.OBSERVER,
        RouteKind.PATTERN,
        RouteKind.TEXT,
        RouteKind.PATTERN,
        RouteKind.TEXT,
        RouteKind.MEDIA,
        RouteKind.ANY_SOUND,
    ]


def test_paths_expand_with_router_username():
    router = Router(username="rock")
    register_routes(router, [path("echo (.+)", view)])
    (route,) = router.all_routes()
    assert route.matcher.pattern == "^/echo(?:@rock)? (.+)$"


def test_re_path_is_not_expanded():
    router = Router(username="rock")
    register_routes(router, [re_path(r"^Tell me (.+)$", view)])
    (route,) = router.all_routes()
    assert route.matcher.pattern == r"^Tell me (.+)$"


def test_invalid_entries_are_not_counted():
    router = Router(username="rock")
    added = register_routes(router, [path("ok", view), re_path("[broken", view)])

    assert added == 1
    assert len(router) == 1


def test_strict_router_stops_on_invalid_entry():
    router = Router(username="rock", strict=True)
    with pytest.raises(InvalidPatternError):
        register_routes(router, [path("ok", view), re_path("[broken", view), path("never", view)])
    assert len(router) == 1
