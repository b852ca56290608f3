from __future__ import annotations

import os

# Plot geometry
DEFAULT_X_RANGE = (0.0, 10.0)
RANGE_PADDING_FRACTION = 0.1
ZERO_SPAN_FALLBACK = 1.0
CURVE_SAMPLES = 300
Y_MIN = -0.05
Y_MAX = 1.05
REFERENCE_Y = 0.5
QUADRANT_UPPER_Y = 0.8
QUADRANT_LOWER_Y = 0.2

# Precision / guard rails
SLOPE_EPS = 1e-8
CLASS_CUTOFF = 0.5

# Animation speed (ms per frame)
DEFAULT_FRAME_DELAY_MS = 700
SPEED_BOUNDS = {"min": 100, "max": 2000, "step": 50}

# Synthetic sample data, tuned for x in [0, 10] with the threshold near mid-range
SAMPLE_SIZE = 70
SAMPLE_SLOPE = 1.2
SAMPLE_INTERCEPT = -6.0
SAMPLE_X_SPAN = 10.0

# UI, mode
DEFAULT_VIEW_MODE = "sigmoid"
UI_BASE_TOKEN = "logistic-"
MAX_SESSIONS = 64

# Logging
LOG_LEVEL = os.environ.get("LOGISTIC_EXPLORER_LOG_LEVEL", "INFO").upper()
ACTIVITY_LOG_CAPACITY = 5

# Plot palette and styles (Okabe-Ito)
FIGURE_COLORS = {
    "class_0": "#0072B2",
    "class_1": "#D55E00",
    "reference": "rgba(120,120,120,0.8)",
    "curve": "#009E73",
    "boundary": "#E69F00",
    "marker": "#F0E442",
    "label_text": "#222222",
}
CLASS_0_MARKER_STYLE = {"color": FIGURE_COLORS["class_0"], "size": 8, "symbol": "circle"}
CLASS_1_MARKER_STYLE = {"color": FIGURE_COLORS["class_1"], "size": 8, "symbol": "circle"}
REFERENCE_LINE_STYLE = {"color": FIGURE_COLORS["reference"], "width": 1.5, "dash": "dash"}
CURVE_LINE_STYLE = {"color": FIGURE_COLORS["curve"], "width": 3}
BOUNDARY_LINE_STYLE = {"color": FIGURE_COLORS["boundary"], "width": 2, "dash": "dot"}
THRESHOLD_MARKER_STYLE = {
    "color": FIGURE_COLORS["marker"],
    "size": 14,
    "symbol": "circle",
    "line": {"color": "#000000", "width": 1},
}
QUADRANT_LABEL_FONT = {"size": 13, "color": FIGURE_COLORS["label_text"]}
AXIS_LINE_STYLE = {"zerolinecolor": "#777777"}

# Sample input shown in the parameter box on first load
EXAMPLE_PARAMS_TEXT = "intercept,slope\n-2.0,0.4\n-4.0,0.8\n-5.0,1.0\n-6.0,1.2\n-7.5,1.5"
