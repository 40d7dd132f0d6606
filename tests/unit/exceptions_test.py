"""Tests for admin exceptions and their rendering."""

from decoy.core.exceptions import (
    AncestryError,
    ControllerNotFoundError,
    ErrorCategory,
    ErrorSeverity,
    ParentControllerError,
    RelationshipMissingError,
    format_exception,
    status_code_for,
)


def test_parent_controller_error() -> None:
    e = ParentControllerError("ArticlesController")
    assert isinstance(e, AncestryError)
    assert e.message == "Error getting the parent controller."
    assert e.details == {"controller": "ArticlesController"}
    assert e.severity is ErrorSeverity.HIGH
    assert e.category is ErrorCategory.ANCESTRY


def test_relationship_missing_message() -> None:
    e = RelationshipMissingError("child", ["article", "articles"], controller="ImagesController", model="Image")
    assert e.message.startswith("Child relationship missing, looking for: article, articles.")
    assert "ImagesController" in e.message
    assert e.details["side"] == "child"
    assert e.details["controller"] == "ImagesController"


def test_format_exception() -> None:
    body = format_exception(ControllerNotFoundError("widgets"))
    assert body.error == "Controller could not be found: widgets"
    assert body.details == {"name": "widgets"}
    assert body.severity == "low"
    assert body.category == "routing"


def test_status_codes() -> None:
    assert status_code_for(ControllerNotFoundError("widgets")) == 404
    assert status_code_for(ParentControllerError("ArticlesController")) == 500
