# clock.py: draw a clock on a cairo context.

import math

import cairo


# drawshape - trace a shape's points and fill and/or stroke them
# parameters:
#   ctx - a cairo context
#   shape - a hands.HandShape
#   palette - config.Palette supplying the fill and stroke colours
#   linewidth - width of the stroke
def drawshape(ctx, shape, palette, linewidth = 2.0):
    (x, y) = shape.points[0]
    ctx.move_to(x, y)
    for (x, y) in shape.points[1:]:
        ctx.line_to(x, y)
    if shape.closed:
        ctx.close_path()

    if shape.fill:
        ctx.set_source_rgb(*getattr(palette, shape.fill))
        if shape.stroke:
            ctx.fill_preserve()
        else:
            ctx.fill()
    if shape.stroke:
        ctx.set_line_width(linewidth)
        ctx.set_source_rgb(*getattr(palette, shape.stroke))
        ctx.stroke()

    if shape.hub_radius:
        (x, y) = shape.points[0]
        ctx.arc(x, y, shape.hub_radius, 0, 2*math.pi)
        ctx.set_source_rgb(*getattr(palette, shape.hub_colour))
        ctx.fill()


# draw_face - draw a hands.ClockFace
# parameters:
#   ctx - a cairo context
#   face - the geometry to draw
#   palette - colours
#   config - config.FaceConfig, for line widths
def draw_face(ctx, face, palette, config):
    ctx.set_line_join(cairo.LINE_JOIN_ROUND)
    ctx.set_line_cap(cairo.LINE_CAP_ROUND)

    for tick in face.ticks:
        drawshape(ctx, tick, palette)

    drawshape(ctx, face.hour_hand, palette, config.outline_width)
    if face.minute_hand.closed:
        drawshape(ctx, face.minute_hand, palette, config.outline_width)
    else:
        drawshape(ctx, face.minute_hand, palette, config.hand_line_width)
    drawshape(ctx, face.second_hand, palette, config.second_hand_width)
