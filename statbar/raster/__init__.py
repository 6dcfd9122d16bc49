from .canvas import draw_hline, draw_pixel, draw_vline, fill_gradient_rect, fill_rect, new_canvas, stroke_rect
from .draw_lines import draw_line
from .draw_text import draw_text, text_size

__all__ = [
    "draw_hline",
    "draw_line",
    "draw_pixel",
    "draw_text",
    "draw_vline",
    "fill_gradient_rect",
    "fill_rect",
    "new_canvas",
    "stroke_rect",
    "text_size",
]
