# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the fixture generator playground."""

from unittest.mock import patch

import dash
import pytest

from fixturegen.generator import DEFAULT_REGISTRY, ExternalType
from fixturegen.generator.formatter import FormatterError
from fixturegen.webui.app import APP_TITLE, EXAMPLE_SOURCE, create_app, render_fixtures


@pytest.fixture(autouse=True)
def _no_gofmt():
    with patch("fixturegen.generator.formatter.run_gofmt", side_effect=FormatterError("disabled")):
        yield


def test_create_app_returns_dash_instance() -> None:
    """create_app returns a Dash application instance."""
    assert isinstance(create_app(), dash.Dash)


def test_create_app_has_layout() -> None:
    """create_app returns an app with a non-None layout."""
    assert create_app().layout is not None


def test_create_app_title() -> None:
    """create_app sets the application title."""
    assert create_app().title == APP_TITLE == "Fixture Generator Playground"


def test_create_app_registers_output_callback() -> None:
    """The output panel is driven by a callback."""
    app = create_app()
    assert any("fixture-output.children" in key for key in app.callback_map)


def test_render_fixtures_mod_style() -> None:
    """The example source renders mod-style fixtures."""
    output = render_fixtures(EXAMPLE_SOURCE)
    assert output.startswith("package fixtures\n")
    assert "func FixtureUser(mods ...func(*User)) *User {" in output
    assert "Address: *FixtureAddress()," in output


def test_render_fixtures_classic_style_and_package() -> None:
    """Package name and style are forwarded to the generator."""
    output = render_fixtures(EXAMPLE_SOURCE, package="testdata", mod_style=False)
    assert output.startswith("package testdata\n")
    assert "func FixtureUser() User {" in output
    assert "Address: ptr(FixtureAddress())," in output


def test_render_fixtures_reports_parse_errors() -> None:
    """Unparseable source yields an error message instead of raising."""
    assert render_fixtures("package p\n\ntype T struct {\n").startswith("error: ")


def test_render_fixtures_custom_registry() -> None:
    """A custom registry is used for field classification."""
    registry = DEFAULT_REGISTRY.with_types({"UUID": ExternalType(import_spec='"uuid"', value="uuid.Nil")})
    output = render_fixtures("package p\n\ntype T struct {\n\tK uuid.UUID\n}\n", registry=registry)
    assert "K: uuid.Nil," in output
