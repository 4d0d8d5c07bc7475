"""Declarative widget table for the alice2 control panel."""

from __future__ import annotations

from bindkit.runtime.controls import ControlBinding, ControlKind
from bindkit.runtime.numeric import format_number
from bindkit.runtime.performance import PerformanceReporter
from alice_ui.app.capabilities import (
    ADD_TEST_GEOMETRY,
    CLEAR_SCENE,
    RESET_CAMERA,
    SET_BACKGROUND_BRIGHTNESS,
    SET_FOV,
    SET_LINE_WIDTH,
    SET_POINT_SIZE,
    TOGGLE_WIREFRAME,
)

DEFAULT_BRIGHTNESS = 0.2
DEFAULT_POINT_SIZE = 5.0
DEFAULT_LINE_WIDTH = 1.0
DEFAULT_FOV_DEGREES = 45.0


def format_degrees(value: float) -> str:
    return f"{format_number(value)}°"


def build_alice_controls(performance: PerformanceReporter) -> tuple[ControlBinding, ...]:
    """Return scene, rendering, camera and debug control wiring."""
    return (
        # Scene
        ControlBinding("#add-test-geometry", ControlKind.BUTTON, capability=ADD_TEST_GEOMETRY),
        ControlBinding("#clear-scene", ControlKind.BUTTON, capability=CLEAR_SCENE),
        ControlBinding("#reset-camera", ControlKind.BUTTON, capability=RESET_CAMERA),
        # Rendering
        ControlBinding(
            "#brightness-slider",
            ControlKind.SLIDER,
            capability=SET_BACKGROUND_BRIGHTNESS,
            default_value=DEFAULT_BRIGHTNESS,
        ),
        ControlBinding(
            "#point-size-slider",
            ControlKind.SLIDER,
            capability=SET_POINT_SIZE,
            default_value=DEFAULT_POINT_SIZE,
        ),
        ControlBinding(
            "#line-width-slider",
            ControlKind.SLIDER,
            capability=SET_LINE_WIDTH,
            default_value=DEFAULT_LINE_WIDTH,
        ),
        # Camera
        ControlBinding(
            "#fov-slider",
            ControlKind.SLIDER,
            capability=SET_FOV,
            default_value=DEFAULT_FOV_DEGREES,
            formatter=format_degrees,
        ),
        # Debug
        ControlBinding("#toggle-wireframe", ControlKind.BUTTON, capability=TOGGLE_WIREFRAME),
        ControlBinding(
            "#performance-info",
            ControlKind.BUTTON,
            action=performance.show_performance_info,
        ),
    )
