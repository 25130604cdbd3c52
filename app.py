"""
Web application for the Uniformly Accelerated Motion Simulator

Interactive dashboard that drives the kinematic engine from a browser timer
and draws the moving marker and the position/velocity charts.
"""

import logging
import threading
import time
from typing import Any, Dict, List, Optional, Tuple

import dash
from dash import dcc, html, Input, Output, ctx
import numpy as np
import plotly.graph_objs as go

from motion import (
    KinematicEngine,
    MotionError,
    SimulationParameters,
    SimulationState,
    closed_track_engine,
    open_track_engine,
)
from motion.kinematics import format_equation

logger = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 50  # Browser timer period driving tick()
SERVER_PORT = 8050

# One engine per variant; the dashboard is a single-user demo
ENGINES: Dict[str, KinematicEngine] = {
    "linear": open_track_engine(),
    "circuit": closed_track_engine(),
}
# Serializes callbacks served on different threads by the Flask dev server
ENGINES_LOCK = threading.Lock()

# center_x, center_y, radius_x, radius_y in drawing units
TRACK_LAYOUTS: Dict[str, Tuple[float, float, float, float]] = {
    "linear": (300.0, 150.0, 250.0, 100.0),
    "circuit": (200.0, 200.0, 150.0, 150.0),
}

SLIDER_IDS = ["x0-slider", "v0-slider", "a-slider", "laps-slider"]


def now_ms() -> float:
    """Monotonic host timestamp (ms)"""
    return time.monotonic() * 1000.0


def slider_params(
    variant: str, x0: float, v0: float, a: float, laps: Optional[float]
) -> Dict[str, Any]:
    """Parameter changes requested by the sliders of a variant"""
    changes: Dict[str, Any] = {"x0": float(x0), "v0": float(v0), "a": float(a)}
    if variant == "circuit" and laps is not None:
        changes["laps"] = int(laps)
    return changes


def _slider(slider_id: str, label: str, low: float, high: float, step: float, value: float) -> html.Div:
    return html.Div([
        html.Label(label, style={'fontWeight': 'bold', 'marginBottom': '5px'}),
        dcc.Slider(
            id=slider_id,
            min=low,
            max=high,
            step=step,
            value=value,
            marks=None,
            tooltip={'placement': 'bottom', 'always_visible': True},
        ),
    ], style={'marginBottom': '20px'})


def _button(button_id: str, label: str, color: str) -> html.Button:
    return html.Button(label, id=button_id,
                       style={'width': '30%', 'padding': '10px', 'fontSize': '16px',
                              'backgroundColor': color, 'color': 'white', 'marginRight': '3%',
                              'border': 'none', 'borderRadius': '5px', 'cursor': 'pointer'})


def build_track_figure(variant: str, engine: KinematicEngine, state: SimulationState) -> go.Figure:
    """Oval track with the start mark and the current marker"""
    center_x, center_y, radius_x, radius_y = TRACK_LAYOUTS[variant]
    angles = np.linspace(0, 2 * np.pi, 200)

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=center_x + radius_x * np.cos(angles),
            y=center_y + radius_y * np.sin(angles),
            mode="lines",
            line=dict(color="#666", width=20),
            hoverinfo="skip",
            showlegend=False,
        )
    )
    # Position 0 maps to angle 0, the rightmost point of the oval
    fig.add_trace(
        go.Scatter(
            x=[center_x + radius_x - 20, center_x + radius_x + 20],
            y=[center_y, center_y],
            mode="lines",
            line=dict(color="#ef4444", width=2, dash="dash"),
            hoverinfo="skip",
            showlegend=False,
        )
    )
    car_x, car_y = engine.project_to_track(state, center_x, center_y, radius_x, radius_y)
    fig.add_trace(
        go.Scatter(
            x=[car_x],
            y=[car_y],
            mode="markers",
            marker=dict(color="#ef4444", size=20),
            hovertemplate=f"Position: {state.position:.2f} m<extra></extra>",
            showlegend=False,
        )
    )

    fig.update_layout(
        height=350,
        template="plotly_white",
        margin=dict(l=10, r=10, t=10, b=10),
        xaxis=dict(visible=False),
        # Screen coordinates: y grows downwards, like the canvas version
        yaxis=dict(visible=False, autorange="reversed", scaleanchor="x"),
    )
    return fig


def build_chart_figure(
    state: SimulationState, field: str, title: str, y_title: str, color: str
) -> go.Figure:
    """Line chart of one sampled quantity against time"""
    times = [s.time for s in state.history]
    values = [getattr(s, field) for s in state.history]

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=times,
            y=values,
            mode="lines",
            name=field,
            line=dict(color=color, width=2),
            hovertemplate=f"Time: %{{x:.2f}}s<br>{y_title}: %{{y:.2f}}<extra></extra>",
        )
    )
    fig.update_layout(
        title=title,
        xaxis_title="Time (s)",
        yaxis_title=y_title,
        hovermode="closest",
        height=300,
        template="plotly_white",
    )
    return fig


def values_panel(state: SimulationState) -> List[Any]:
    return [
        html.H3("Current Values", style={'marginBottom': '10px'}),
        html.P(f"Time: {state.elapsed_time:.2f} s"),
        html.P(f"Position: {state.position:.2f} m"),
        html.P(f"Velocity: {state.velocity:.2f} m/s"),
    ]


def apply_control(
    variant: str,
    trigger: Optional[str],
    x0: float,
    v0: float,
    a: float,
    laps: Optional[float],
) -> Tuple[SimulationState, SimulationParameters, Optional[str]]:
    """
    Apply one dashboard control to the engine of a variant

    Holds ENGINES_LOCK across the control and the snapshot, so a frame-timer
    tick and a button click served on different threads never interleave.

    Returns:
        Tuple of (state, params, error message or None)
    """
    error: Optional[str] = None
    with ENGINES_LOCK:
        engine = ENGINES[variant]
        try:
            if trigger == "variant-select":
                for other in ENGINES.values():
                    other.stop()
                engine.reset()
            elif trigger == "start-button":
                if not engine.running:
                    engine.set_parameters(**slider_params(variant, x0, v0, a, laps))
                    engine.start()
                    engine.tick(now_ms())
            elif trigger == "stop-button":
                engine.stop()
            elif trigger == "reset-button":
                engine.stop()
                engine.set_parameters(**slider_params(variant, x0, v0, a, laps))
                engine.reset()
            elif trigger == "frame-timer":
                engine.tick(now_ms())
            elif trigger in SLIDER_IDS and not engine.running:
                engine.set_parameters(**slider_params(variant, x0, v0, a, laps))
        except MotionError as e:
            logger.warning("Control %s failed: %s", trigger, e)
            error = str(e)
        return engine.state, engine.params, error


# Initialize Dash app
app = dash.Dash(__name__)
app.title = "Uniformly Accelerated Motion Simulator"

# Define app layout
app.layout = html.Div([
    html.Div([
        html.H1("Uniformly Accelerated Motion Simulator",
                style={'textAlign': 'center', 'marginBottom': '30px'}),

        dcc.RadioItems(
            id='variant-select',
            options=[
                {'label': 'Linear track (10 s)', 'value': 'linear'},
                {'label': 'Circuit (laps)', 'value': 'circuit'},
            ],
            value='linear',
            inline=True,
            style={'marginBottom': '20px'},
        ),

        html.Div([
            html.Div([
                html.Div(id='equation',
                         style={'fontSize': '24px', 'fontWeight': 'bold',
                                'textAlign': 'center', 'marginBottom': '20px'}),
                _slider('x0-slider', "Initial Position (X₀, m):", -50, 50, 1, 0),
                _slider('v0-slider', "Initial Velocity (V₀, m/s):", -20, 20, 1, 10),
                _slider('a-slider', "Acceleration (a, m/s²):", -10, 10, 0.5, 2),
                html.Div(
                    _slider('laps-slider', "Number of Laps:", 1, 10, 1, 3),
                    id='laps-container',
                    style={'display': 'none'},
                ),
                html.Div([
                    _button('start-button', 'Start', '#4CAF50'),
                    _button('stop-button', 'Stop', '#f59e0b'),
                    _button('reset-button', 'Reset', '#ef4444'),
                ], style={'marginBottom': '20px'}),
                html.Div(id='status-message', style={'marginBottom': '20px', 'fontSize': '14px'}),
                html.Div(id='values-panel',
                         style={'padding': '15px', 'backgroundColor': '#eff6ff',
                                'borderRadius': '10px'}),
            ], style={'width': '40%', 'display': 'inline-block', 'verticalAlign': 'top',
                      'padding': '20px', 'backgroundColor': '#f5f5f5', 'borderRadius': '10px',
                      'marginRight': '2%'}),

            html.Div([
                dcc.Graph(id='track-graph', config={'displayModeBar': False}),
                dcc.Graph(id='position-graph'),
                dcc.Graph(id='velocity-graph'),
            ], style={'width': '54%', 'display': 'inline-block', 'verticalAlign': 'top'}),
        ]),

        dcc.Interval(id='frame-timer', interval=FRAME_INTERVAL_MS, disabled=True),
    ], style={'maxWidth': '1400px', 'margin': '0 auto', 'padding': '20px'})
])


@app.callback(
    [
        Output("x0-slider", "min"), Output("x0-slider", "max"), Output("x0-slider", "value"),
        Output("v0-slider", "min"), Output("v0-slider", "max"), Output("v0-slider", "value"),
        Output("laps-container", "style"),
    ],
    [Input("variant-select", "value")],
)
def configure_variant(variant: str) -> tuple:
    """Match slider ranges to the selected track variant"""
    with ENGINES_LOCK:
        engine = ENGINES[variant]
        bounds = engine.bounds
        params = engine.params
    laps_style = {'display': 'block'} if variant == "circuit" else {'display': 'none'}
    return (
        bounds.x0[0], bounds.x0[1], params.x0,
        bounds.v0[0], bounds.v0[1], params.v0,
        laps_style,
    )


@app.callback(
    [
        Output("track-graph", "figure"),
        Output("position-graph", "figure"),
        Output("velocity-graph", "figure"),
        Output("values-panel", "children"),
        Output("equation", "children"),
        Output("status-message", "children"),
        Output("frame-timer", "disabled"),
        Output("start-button", "disabled"),
        Output("stop-button", "disabled"),
    ] + [Output(slider_id, "disabled") for slider_id in SLIDER_IDS],
    [
        Input("start-button", "n_clicks"),
        Input("stop-button", "n_clicks"),
        Input("reset-button", "n_clicks"),
        Input("frame-timer", "n_intervals"),
        Input("variant-select", "value"),
    ] + [Input(slider_id, "value") for slider_id in SLIDER_IDS],
)
def update_simulation(
    start_clicks: Optional[int],
    stop_clicks: Optional[int],
    reset_clicks: Optional[int],
    n_intervals: Optional[int],
    variant: str,
    x0: float,
    v0: float,
    a: float,
    laps: float,
) -> tuple:
    """Apply the triggered control, tick the engine and redraw"""
    engine = ENGINES[variant]
    state, params, error = apply_control(variant, ctx.triggered_id, x0, v0, a, laps)
    status_msg: Any = html.Div(f"Error: {error}", style={"color": "red"}) if error else ""
    running = state.running
    return (
        build_track_figure(variant, engine, state),
        build_chart_figure(state, "position", "Position vs Time", "Position (m)", "#3b82f6"),
        build_chart_figure(state, "velocity", "Velocity vs Time", "Velocity (m/s)", "#82ca9d"),
        values_panel(state),
        format_equation(params),
        status_msg,
        not running,
        running,
        not running,
    ) + tuple(running for _ in SLIDER_IDS)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app.run(debug=True, port=SERVER_PORT)
