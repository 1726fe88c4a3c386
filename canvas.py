# canvas.py - create and save the cairo surfaces the clock is drawn on
import logging

import cairo

logger = logging.getLogger(__name__)


# init_canvas - initialize a cairo canvas and context
# The canvas is of size (w, h), and is optionally cleared to
# the given color.
# Coordinates are plain pixels with y growing downwards, which is the
# convention the dial geometry uses.
def init_canvas(w, h, clearcolor = None):
    surf = cairo.ImageSurface(cairo.FORMAT_RGB24, w, h)
    ctx = cairo.Context(surf)
    ctx.set_line_width(1)

    if clearcolor:
        clear(ctx, w, h, clearcolor)

    return (ctx, surf)


def clear(ctx, w, h, color):
    ctx.save()
    ctx.set_operator(cairo.OPERATOR_SOURCE)
    ctx.rectangle(0, 0, w, h)
    ctx.set_source_rgb(*color)
    ctx.fill()
    ctx.restore()


# save_png - flush pending drawing and write the surface out
def save_png(surf, filename):
    surf.flush()
    surf.write_to_png(filename)
    logger.debug("wrote %s", filename)
