"""Tests for devboard.sanitize.styles."""

import pytest

from devboard.sanitize.styles import sanitize_style


def test_drops_url_values() -> None:
    assert sanitize_style("background: url(evil.com); color: red;") == "color: red"


def test_keeps_order_and_normalises_names() -> None:
    result = sanitize_style("Font-Weight: bold;COLOR:blue ; text-align : center")
    assert result == "font-weight: bold; color: blue; text-align: center"


def test_drops_unknown_properties() -> None:
    assert sanitize_style("position: fixed; z-index: 9999") == ""


@pytest.mark.parametrize("value", [
    "color: expression(alert(1))",
    "color: EXPRESSION(alert(1))",
    "background-color: javascript:alert(1)",
    "border: 1px behavior: url(x.htc)",
    "margin: URL(x)",
])
def test_drops_dangerous_values(value) -> None:
    assert sanitize_style(value) == ""


def test_declarations_without_colon_are_skipped() -> None:
    assert sanitize_style("color red; padding: 4px") == "padding: 4px"


def test_value_may_contain_colons() -> None:
    assert sanitize_style("font-size: 12px:14px") == "font-size: 12px:14px"


@pytest.mark.parametrize("value", ["", None, ";;;"])
def test_empty_results(value) -> None:
    assert sanitize_style(value) == ""
