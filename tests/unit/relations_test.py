"""Tests for relationship lookups on mapped models."""

from decoy.db.relations import RelationKind, has_accessor, is_polymorphic_name, relation_kind
from tests.cms_app import Article, Image, Photo, Post, SuperSlide, Tag, NotAnAuth


def test_one_to_many() -> None:
    assert relation_kind(Article, "superSlides") is RelationKind.ONE_TO_MANY
    assert relation_kind(Post, "images") is RelationKind.ONE_TO_MANY


def test_many_to_one() -> None:
    assert relation_kind(SuperSlide, "article") is RelationKind.MANY_TO_ONE
    assert relation_kind(Image, "post") is RelationKind.MANY_TO_ONE


def test_many_to_many() -> None:
    assert relation_kind(Tag, "posts") is RelationKind.MANY_TO_MANY
    assert relation_kind(Post, "tags") is RelationKind.MANY_TO_MANY


def test_polymorphic_property() -> None:
    assert relation_kind(Photo, "photoable") is RelationKind.POLYMORPHIC


def test_columns_are_not_relationships() -> None:
    assert relation_kind(Article, "title") is None
    assert has_accessor(Article, "title") is False


def test_missing() -> None:
    assert relation_kind(Article, "tags") is None
    assert has_accessor(Article, "tags") is False


def test_no_model() -> None:
    assert relation_kind(None, "posts") is None
    assert relation_kind(Tag, "") is None


def test_unmapped_class() -> None:
    assert relation_kind(NotAnAuth, "posts") is None


def test_has_accessor() -> None:
    assert has_accessor(Article, "superSlides") is True
    assert has_accessor(Photo, "photoable") is True


def test_is_polymorphic_name() -> None:
    assert is_polymorphic_name("imageable") is True
    assert is_polymorphic_name("images") is False
