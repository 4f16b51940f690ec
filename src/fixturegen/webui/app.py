# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dash-based playground: paste Go type declarations, get fixtures back."""

import dash
from dash import Input, Output, dcc, html

from fixturegen.frontend import ExtractionError, parse_source
from fixturegen.generator import DEFAULT_REGISTRY, ExternalTypeRegistry, GenerateOptions, generate_formatted

# ###############
# Public Interface
# ###############

APP_TITLE = "Fixture Generator Playground"

DEFAULT_PACKAGE = "fixtures"

EXAMPLE_SOURCE = """package models

type Status int32

const (
\tStatus_UNKNOWN Status = 0
\tStatus_ACTIVE  Status = 1
)

type User struct {
\tID        string
\tFirstName string
\tAge       int
\tStatus    Status
\tAddress   *Address
}

type Address struct {
\tStreet string
\tCity   string
}
"""


def create_app(registry: ExternalTypeRegistry = DEFAULT_REGISTRY) -> dash.Dash:
    """Create and configure the playground application."""
    app = dash.Dash(
        __name__,
        title=APP_TITLE,
    )
    app.layout = _build_layout()

    @app.callback(
        Output("fixture-output", "children"),
        Input("source-input", "value"),
        Input("package-input", "value"),
        Input("style-input", "value"),
    )
    def _update_output(source: str | None, package: str | None, style: str | None) -> str:
        return render_fixtures(source or "", package or DEFAULT_PACKAGE, style != "classic", registry)

    return app


def render_fixtures(
    source: str,
    package: str = DEFAULT_PACKAGE,
    mod_style: bool = True,
    registry: ExternalTypeRegistry = DEFAULT_REGISTRY,
) -> str:
    """Generate fixtures for *source*, or describe why that failed.

    Returns:
        The formatted fixtures file, or ``error: <message>`` when the source
        cannot be parsed.
    """
    try:
        model = parse_source(source, registry)
    except ExtractionError as exc:
        return f"error: {exc}"
    return generate_formatted(model, package, GenerateOptions(mod_style=mod_style), registry)


# ################
# Implementation
# ################


def _build_layout() -> html.Div:
    """Build the application layout."""
    return html.Div(
        [
            html.H1(APP_TITLE),
            html.Div(
                [
                    html.Label("Package name"),
                    dcc.Input(id="package-input", type="text", value=DEFAULT_PACKAGE),
                    dcc.RadioItems(
                        id="style-input",
                        options=[
                            {"label": "Mod style", "value": "mod"},
                            {"label": "Classic style", "value": "classic"},
                        ],
                        value="mod",
                        inline=True,
                    ),
                ],
                style={"display": "flex", "gap": "1rem", "alignItems": "center"},
            ),
            html.Hr(),
            html.Div(
                [
                    dcc.Textarea(
                        id="source-input",
                        value=EXAMPLE_SOURCE,
                        style={"width": "50%", "height": "70vh", "fontFamily": "monospace"},
                    ),
                    html.Pre(
                        id="fixture-output",
                        style={"width": "50%", "height": "70vh", "overflow": "auto", "margin": 0},
                    ),
                ],
                style={"display": "flex", "gap": "1rem"},
            ),
        ],
        style={"fontFamily": "sans-serif", "padding": "2rem"},
    )
