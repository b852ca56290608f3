"""Dash front end for the Logistic Regression Explorer."""

from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

import dash
from dash import Input, Output, State, dcc, html

from logistic_explorer import config
from logistic_explorer.logging_config import setup_logging
from logistic_explorer.session_store import SessionStore

_SESSIONS = SessionStore()

_PANEL_STYLE: Dict[str, Any] = {
    "display": "flex",
    "flexDirection": "column",
    "gap": "10px",
}
_TEXTAREA_STYLE: Dict[str, Any] = {
    "width": "100%",
    "height": "180px",
    "fontFamily": "monospace",
    "fontSize": "0.85rem",
}
_BUTTON_STYLE: Dict[str, Any] = {"padding": "8px 16px", "marginRight": "8px"}


def _safe_session_id(session_data: Optional[Dict[str, Any]]) -> str:
    if isinstance(session_data, dict):
        raw = session_data.get("session_id")
        if isinstance(raw, str) and raw:
            return raw
    return "unknown"


def _speed_label(delay_ms: int) -> str:
    return f"{delay_ms} ms per frame"


def _serve_layout() -> html.Div:
    bounds = config.SPEED_BOUNDS
    data_panel = html.Div(
        [
            html.H3("Dataset (x, y)"),
            html.Div(
                [
                    html.Button("Load sample data", id="btn-load-sample", n_clicks=0, style=_BUTTON_STYLE),
                    dcc.Clipboard(target_id="dataset-text", title="Copy dataset", style={"display": "inline-block"}),
                ],
                style={"display": "flex", "alignItems": "center"},
            ),
            dcc.Textarea(
                id="dataset-text",
                value="",
                placeholder="x,y\n0.5,0\n7.2,1",
                style=_TEXTAREA_STYLE,
            ),
        ],
        style=_PANEL_STYLE,
    )

    params_panel = html.Div(
        [
            html.H3("Parameters (intercept, slope)"),
            html.P(
                "One row per frame: first column intercept b, second column slope a, for sigmoid(a·x + b).",
                style={"fontSize": "0.85rem", "color": "#555555", "margin": "0"},
            ),
            dcc.Textarea(
                id="params-text",
                value=config.EXAMPLE_PARAMS_TEXT,
                style=_TEXTAREA_STYLE,
            ),
            html.Div(
                [
                    html.Button("Start", id="btn-start", n_clicks=0, style=_BUTTON_STYLE),
                    html.Button("Pause / Resume", id="btn-pause", n_clicks=0, style=_BUTTON_STYLE),
                    html.Button("Reset", id="btn-reset", n_clicks=0, style=_BUTTON_STYLE),
                ]
            ),
            html.Label("Speed", htmlFor="speed-slider"),
            dcc.Slider(
                id="speed-slider",
                min=bounds["min"],
                max=bounds["max"],
                step=bounds["step"],
                value=config.DEFAULT_FRAME_DELAY_MS,
                marks={bounds["min"]: f"{bounds['min']} ms", bounds["max"]: f"{bounds['max']} ms"},
            ),
            html.Div(_speed_label(config.DEFAULT_FRAME_DELAY_MS), id="speed-label", style={"fontSize": "0.85rem"}),
            html.Label("View"),
            dcc.RadioItems(
                id="view-mode",
                options=[
                    {"label": "Sigmoid", "value": "sigmoid"},
                    {"label": "Threshold", "value": "threshold"},
                ],
                value=config.DEFAULT_VIEW_MODE,
                inline=True,
            ),
        ],
        style=_PANEL_STYLE,
    )

    controls_column = html.Div(
        [html.H2("Controls"), data_panel, params_panel],
        style={"flex": "1", "minWidth": "280px"},
    )

    graph_column = html.Div(
        [
            html.H2("Graph"),
            dcc.Graph(id="graph-main", config={"displaylogo": False}),
            html.Div(
                "",
                id="live-status",
                role="status",
                **{"aria-live": "polite"},
                style={"fontSize": "0.95rem", "minHeight": "1.5em", "marginTop": "8px"},
            ),
            dcc.Markdown(
                "Recent activity will appear here.",
                id="log-display",
                style={"marginTop": "16px", "fontSize": "0.9rem"},
            ),
        ],
        style={"flex": "2", "minWidth": "0"},
    )

    return html.Div(
        [
            dcc.Store(
                id="store-session",
                storage_type="session",
                data={"session_id": uuid.uuid4().hex},
            ),
            dcc.Interval(
                id="interval-frames",
                interval=config.DEFAULT_FRAME_DELAY_MS,
                n_intervals=0,
                disabled=True,
            ),
            html.H1("Logistic Regression Explorer"),
            html.Div(
                [controls_column, graph_column],
                style={"display": "flex", "gap": "32px", "alignItems": "flex-start"},
            ),
        ],
        style={"padding": "32px"},
    )


app = dash.Dash(__name__, title="Logistic Regression Explorer")
server = app.server
app.layout = _serve_layout


def _render_activity(entries) -> str:
    if not entries:
        return "Recent activity will appear here."
    lines = [f"- {entry}" for entry in reversed(entries)]
    return "\n".join(["Recent activity:", *lines])


@app.callback(
    [
        Output("graph-main", "figure"),
        Output("interval-frames", "disabled"),
        Output("interval-frames", "interval"),
        Output("dataset-text", "value"),
        Output("speed-label", "children"),
        Output("live-status", "children"),
        Output("log-display", "children"),
    ],
    [
        Input("btn-load-sample", "n_clicks"),
        Input("dataset-text", "n_blur"),
        Input("view-mode", "value"),
        Input("btn-start", "n_clicks"),
        Input("btn-pause", "n_clicks"),
        Input("btn-reset", "n_clicks"),
        Input("speed-slider", "value"),
        Input("interval-frames", "n_intervals"),
    ],
    [
        State("dataset-text", "value"),
        State("params-text", "value"),
        State("store-session", "data"),
    ],
)
def _handle_command(
    sample_clicks,
    dataset_blurs,
    view_mode,
    start_clicks,
    pause_clicks,
    reset_clicks,
    speed_value,
    n_intervals,
    dataset_text,
    params_text,
    session_data,
):
    ctx = dash.callback_context
    trigger_id = ctx.triggered[0]["prop_id"].split(".")[0] if ctx.triggered else ""
    session, lock = _SESSIONS.get(_safe_session_id(session_data))
    dataset_update = dash.no_update

    with lock:
        if trigger_id == "interval-frames":
            if not session.scheduler.fire():
                return (
                    dash.no_update,
                    True,
                    dash.no_update,
                    dash.no_update,
                    dash.no_update,
                    dash.no_update,
                    dash.no_update,
                )
        elif trigger_id == "btn-load-sample":
            dataset_update = session.load_sample()
        elif trigger_id == "dataset-text":
            session.plot(dataset_text)
        elif trigger_id == "view-mode":
            session.set_view_mode(view_mode)
        elif trigger_id == "btn-start":
            session.start(params_text)
        elif trigger_id == "btn-pause":
            session.pause_or_resume()
        elif trigger_id == "btn-reset":
            session.reset()
        elif trigger_id == "speed-slider":
            session.set_speed(speed_value)
        else:
            # Page load: sync the radio and the text box with the server-side session.
            if session.view_mode.value != view_mode:
                session.set_view_mode(view_mode)
            if session.context.dataset:
                dataset_update = session.dataset_text
            else:
                dataset_update = session.load_sample()

        scheduler = session.scheduler
        return (
            session.figure,
            not scheduler.pending,
            scheduler.delay_ms or session.engine.frame_delay_ms,
            dataset_update,
            _speed_label(session.engine.frame_delay_ms),
            session.status(),
            _render_activity(session.activity),
        )


if __name__ == "__main__":
    setup_logging()
    app.run(debug=True)
