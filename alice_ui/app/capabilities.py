"""Entry points exported by the native alice2 host."""

from __future__ import annotations

from bindkit.api.host import HostCapability

ENTRY_POINT_PREFIX = "_alice2_"

RESIZE: HostCapability = "_alice2_resize"
CLEAR_SCENE: HostCapability = "_alice2_clear_scene"
ADD_TEST_GEOMETRY: HostCapability = "_alice2_add_test_geometry"
RESET_CAMERA: HostCapability = "_alice2_reset_camera"
SET_BACKGROUND_BRIGHTNESS: HostCapability = "_alice2_set_background_brightness"
SET_POINT_SIZE: HostCapability = "_alice2_set_point_size"
SET_LINE_WIDTH: HostCapability = "_alice2_set_line_width"
SET_FOV: HostCapability = "_alice2_set_fov"
TOGGLE_WIREFRAME: HostCapability = "_alice2_toggle_wireframe"

# Binding waits for these; everything else is checked at each call site.
REQUIRED_CAPABILITIES: tuple[HostCapability, ...] = (RESIZE, CLEAR_SCENE, ADD_TEST_GEOMETRY)
OPTIONAL_CAPABILITIES: tuple[HostCapability, ...] = (
    RESET_CAMERA,
    SET_BACKGROUND_BRIGHTNESS,
    SET_POINT_SIZE,
    SET_LINE_WIDTH,
    SET_FOV,
    TOGGLE_WIREFRAME,
)
