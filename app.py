import time

import streamlit as st
import streamlit_shadcn_ui as ui

from logistic_explorer import config
from logistic_explorer.logging_config import logging_configured, setup_logging
from logistic_explorer.session import ExplorerSession

# The script reruns on every interaction; configure logging once per process.
if not logging_configured():
    setup_logging()

st.set_page_config(page_title="Logistic Regression Explorer", layout="wide")

st.title("Logistic Regression Explorer")
st.caption("Paste a dataset and a list of (intercept, slope) pairs, then watch the sigmoid sweep across the data.")

# One session per browser tab; it keeps its position across reruns
if "explorer_session" not in st.session_state:
    _session = ExplorerSession.create()
    st.session_state["explorer_session"] = _session
    st.session_state["dataset_text"] = _session.load_sample()
    st.session_state["params_text"] = config.EXAMPLE_PARAMS_TEXT
    st.session_state["view_mode_choice"] = "Sigmoid"
    st.session_state["speed_last"] = float(config.DEFAULT_FRAME_DELAY_MS)

session: ExplorerSession = st.session_state["explorer_session"]


def _on_load_sample():
    st.session_state["dataset_text"] = session.load_sample()


def _on_dataset_change():
    session.plot(st.session_state.get("dataset_text", ""))


def _on_view_mode_change():
    session.set_view_mode(st.session_state.get("view_mode_choice", "Sigmoid"))


def _on_start():
    session.start(st.session_state.get("params_text", ""))


def _coerce_slider_value(raw):
    if isinstance(raw, (list, tuple)):
        raw = raw[0] if raw else None
    if isinstance(raw, str):
        try:
            raw = float(raw)
        except ValueError:
            raw = None
    if isinstance(raw, (int, float)):
        return float(raw)
    return None


left_col, right_col = st.columns([1, 2], gap="large")

with left_col:
    st.header("Controls")
    st.subheader("Dataset (x, y)")
    st.button("Load sample data", on_click=_on_load_sample, use_container_width=True)
    st.text_area("Rows of x,y (header optional)", key="dataset_text", height=200, on_change=_on_dataset_change)

    st.subheader("Parameters (intercept, slope)")
    st.text_area("One row per frame", key="params_text", height=180)
    start_col, pause_col, reset_col = st.columns(3)
    start_col.button("Start", on_click=_on_start, use_container_width=True)
    pause_col.button("Pause / Resume", on_click=session.pause_or_resume, use_container_width=True)
    reset_col.button("Reset", on_click=session.reset, use_container_width=True)

    bounds = config.SPEED_BOUNDS
    speed_value = ui.slider(
        label="Speed (ms per frame)",
        min_value=bounds["min"],
        max_value=bounds["max"],
        step=bounds["step"],
        default_value=[session.engine.frame_delay_ms],
        key="speed_slider",
    )
    raw_speed = _coerce_slider_value(speed_value)
    if raw_speed is None:
        raw_speed = st.session_state.get("speed_last")
    else:
        st.session_state["speed_last"] = raw_speed
    if raw_speed is not None and int(raw_speed) != session.engine.frame_delay_ms:
        session.set_speed(raw_speed)
    st.caption(f"{session.engine.frame_delay_ms} ms per frame")

    st.radio(
        "View",
        options=["Sigmoid", "Threshold"],
        key="view_mode_choice",
        on_change=_on_view_mode_change,
        horizontal=True,
    )

with right_col:
    st.header("Graph")
    chart_slot = st.empty()
    status_slot = st.empty()
    st.divider()
    st.markdown("\n".join(["**Recent activity**", *[f"- {entry}" for entry in reversed(session.activity)]]))

    chart_slot.plotly_chart(
        session.figure,
        use_container_width=True,
        config={"displaylogo": False},
        key=f"chart-{session.context.surface.revision}",
    )
    status_slot.write(session.status())

    # Any button click interrupts this loop with a rerun; the session keeps its place.
    scheduler = session.scheduler
    while scheduler.pending:
        time.sleep(scheduler.delay_ms / 1000.0)
        scheduler.fire()
        chart_slot.plotly_chart(
            session.figure,
            use_container_width=True,
            config={"displaylogo": False},
            key=f"chart-{session.context.surface.revision}",
        )
        status_slot.write(session.status())
