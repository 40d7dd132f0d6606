"""Tests for wildcard route resolution."""

import pytest

from decoy.routing.wildcard import Wildcard
from tests.cms_app import ArticlesController, SuperSlidesController, TagsController, cms_registry


def wildcard(path: str, verb: str = "GET") -> Wildcard:
    return Wildcard("admin", verb, path, registry=cms_registry)


class TestParsing:
    def test_index(self) -> None:
        w = wildcard("/admin/articles")
        assert w.slugs == ["articles"]
        assert w.ids == []
        assert w.action is None

    def test_nested_with_action(self) -> None:
        w = wildcard("/admin/articles/2/super-slides/5/edit")
        assert w.slugs == ["articles", "super-slides"]
        assert w.ids == ["2", "5"]
        assert w.action == "edit"

    def test_outside_dir(self) -> None:
        w = wildcard("/public/articles")
        assert w.slugs == []
        assert w.detect_controller() is None
        assert w.detect_action() is None

    def test_dir_is_normalized(self) -> None:
        w = Wildcard("/admin/", "GET", "/admin/articles", registry=cms_registry)
        assert w.detect_controller() is ArticlesController


class TestControllers:
    def test_get_all_classes(self) -> None:
        w = wildcard("/admin/articles/2/super-slides")
        assert w.get_all_classes() == [ArticlesController, SuperSlidesController]

    def test_unknown_slugs_are_skipped(self) -> None:
        w = wildcard("/admin/widgets/2/super-slides")
        assert w.get_all_classes() == [SuperSlidesController]
        assert w.unknown_slugs() == ["widgets"]
        assert w.detect_parent_id() is None

    def test_parent_id_follows_the_parent_controller(self) -> None:
        w = wildcard("/admin/articles/2/widgets/9/super-slides")
        assert w.get_all_classes() == [ArticlesController, SuperSlidesController]
        assert w.detect_parent_id() == "2"

    def test_no_unknown_slugs(self) -> None:
        assert wildcard("/admin/articles/2/super-slides").unknown_slugs() == []

    def test_detect_controller_is_innermost(self) -> None:
        assert wildcard("/admin/articles/2/super-slides").detect_controller() is SuperSlidesController

    def test_detect_unknown_controller(self) -> None:
        assert wildcard("/admin/widgets").detect_controller() is None


class TestActions:
    @pytest.mark.parametrize(
        "verb,path,expected",
        [
            ("GET", "/admin/tags", "index"),
            ("GET", "/admin/tags/create", "create"),
            ("GET", "/admin/tags/3", "edit"),
            ("GET", "/admin/tags/3/edit", "edit"),
            ("POST", "/admin/tags", "store"),
            ("POST", "/admin/tags/3", "update"),
            ("PUT", "/admin/tags/3", "update"),
            ("PATCH", "/admin/tags/3", "update"),
            ("DELETE", "/admin/tags/3", "destroy"),
            ("POST", "/admin/tags/attach", "attach"),
            ("GET", "/admin/tags/autocomplete", "autocomplete"),
        ],
    )
    def test_detect_action(self, verb: str, path: str, expected: str) -> None:
        assert wildcard(path, verb).detect_action() == expected

    def test_slug_named_like_an_action(self) -> None:
        # A lone segment is always a slug
        w = wildcard("/admin/create")
        assert w.slugs == ["create"]
        assert w.action is None

    def test_verb_is_case_insensitive(self) -> None:
        assert wildcard("/admin/tags", "post").detect_action() == "store"


class TestIds:
    def test_detect_id(self) -> None:
        assert wildcard("/admin/tags/3/edit").detect_id() == "3"

    def test_no_id_on_index(self) -> None:
        assert wildcard("/admin/articles/2/super-slides").detect_id() is None

    def test_detect_parent_id(self) -> None:
        assert wildcard("/admin/articles/2/super-slides").detect_parent_id() == "2"
        assert wildcard("/admin/articles/2/super-slides/5/edit").detect_parent_id() == "2"

    def test_no_parent_id_at_top_level(self) -> None:
        assert wildcard("/admin/articles/2/edit").detect_parent_id() is None

    def test_tags_controller_is_routed(self) -> None:
        assert wildcard("/admin/tags/3").detect_controller() is TagsController
