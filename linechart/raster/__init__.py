from .canvas import blend_mask, draw_hline, draw_pixel, draw_vline, new_canvas
from .draw_lines import draw_polyline, truncate_polyline
from .draw_shapes import draw_disc, draw_dot, fill_polygon
from .draw_text import draw_text_centered, text_size

__all__ = [
    "blend_mask",
    "draw_disc",
    "draw_dot",
    "draw_hline",
    "draw_pixel",
    "draw_polyline",
    "draw_text_centered",
    "draw_vline",
    "fill_polygon",
    "new_canvas",
    "text_size",
]
