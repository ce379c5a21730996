"""
Transform builder - turns a ZoomState into a render-ready transform

Edge clamping keeps the zoomed view inside the source frame. With edge
padding configured the frame is drawn inset, so the view may travel
further: all the way to the edge without rounded corners, or up to the
corner radius when the frame corners are rounded.
"""

from typing import Optional, Tuple

from zoomline.models.zoom_state import TransformDescriptor, TransformOptions, ZoomState

# Scales at or below this render as identity
MIN_VISIBLE_SCALE = 1.001


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_center(state: ZoomState, options: TransformOptions) -> Tuple[float, float]:
    """Apply the edge clamping policy for options to the state's center"""
    half_visible = 0.5 / state.scale

    if not options.has_padding:
        margin_x = margin_y = half_visible
    elif options.has_rounding:
        margin_x = min(half_visible, options.corner_radius_px / options.frame_width)
        margin_y = min(half_visible, options.corner_radius_px / options.frame_height)
    else:
        return state.center_x, state.center_y

    return (
        _clamp(state.center_x, margin_x, 1.0 - margin_x),
        _clamp(state.center_y, margin_y, 1.0 - margin_y),
    )


def to_transform(state: ZoomState, options: Optional[TransformOptions] = None) -> TransformDescriptor:
    """
    Build the transform for a zoom state

    Args:
        state: Camera state from the projector
        options: Clamping options (None = defaults, no padding)

    Returns:
        TransformDescriptor, an explicit identity when not zoomed
    """
    if state.scale <= MIN_VISIBLE_SCALE:
        return TransformDescriptor.identity()

    options = options or TransformOptions()
    center_x, center_y = clamp_center(state, options)
    shift = 100.0 * (state.scale - 1.0) / state.scale

    return TransformDescriptor(
        scale_factor=state.scale,
        translate_percent_x=(0.5 - center_x) * shift,
        translate_percent_y=(0.5 - center_y) * shift,
        origin_x_percent=center_x * 100.0,
        origin_y_percent=center_y * 100.0,
    )
