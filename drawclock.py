#!/usr/bin/python3
# drawclock.py: render the clock face to a PNG, once or on a timer.
import argparse, datetime, logging, sys, time

import clock
from canvas import init_canvas, save_png
from clocktime import decompose, ms_of_day
from config import FaceConfig, MINUTE_HAND_STYLES, default_palette
from hands import build_face
from logging_config import setup_logging

logger = logging.getLogger(__name__)


# make_renderer - build the render(now) entry point
# Each call draws a fresh frame for the given time and writes it to
# filename. Returns the ClockFace that was drawn.
def make_renderer(filename, config, palette = default_palette):
    def render(now):
        face = build_face(decompose(ms_of_day(now)), config)
        (ctx, surf) = init_canvas(config.size, config.size, palette.background)
        clock.draw_face(ctx, face, palette, config)
        save_png(surf, filename)
        return face
    return render


# run - call render(now()) every interval seconds
# Ticks never overlap: the next one starts after the previous returns,
# lined up on multiples of interval from the first tick. If a tick runs
# late the next one starts straight away. frames = None runs forever.
# Errors from render are logged and re-raised. Returns the frame count.
def run(render, interval, frames = None, now = datetime.datetime.now,
        monotonic = time.monotonic, sleep = time.sleep):
    count = 0
    start = monotonic()
    while frames is None or count < frames:
        try:
            render(now())
        except Exception:
            logger.exception("rendering frame %d failed", count)
            raise
        count += 1
        if frames is not None and count >= frames:
            break
        delay = start + count * interval - monotonic()
        if delay > 0:
            sleep(delay)
    return count


def parse_time(value):
    try:
        return datetime.time.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError("not a time of day: %r" % value)


def parse_frames(value):
    frames = int(value)
    if frames < 0:
        raise argparse.ArgumentTypeError("frame count can't be negative: %d" % frames)
    return frames


# parse_args - read the command line
# The FaceConfig built from the options is returned as args.config; values
# it refuses are reported like any other bad argument.
def parse_args(argv):
    parser = argparse.ArgumentParser(description="Draw an analog clock face.")
    parser.add_argument("--time", type=parse_time,
                        help="time to show as HH:MM[:SS[.fff]] (default: now)")
    parser.add_argument("--output", default="clock.png")
    parser.add_argument("--size", type=int, default=600)
    parser.add_argument("--minute-hand", choices=MINUTE_HAND_STYLES, default="polygon")
    parser.add_argument("--frames", type=parse_frames,
                        help="keep redrawing for this many frames (0: until interrupted)")
    parser.add_argument("--interval", type=float, default=0.01,
                        help="seconds between frames")
    parser.add_argument("--log-file", help="also write the log to this file")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    try:
        args.config = FaceConfig(size=args.size, minute_hand=args.minute_hand,
                                 interval=args.interval)
    except ValueError as e:
        parser.error(str(e))
    return args


def main(argv = None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    config = args.config
    render = make_renderer(args.output, config)

    if args.time is not None:
        fixed = args.time
        now = lambda: fixed
    else:
        now = datetime.datetime.now

    # --frames 0 keeps going until interrupted
    frames = 1 if args.frames is None else (args.frames or None)
    try:
        count = run(render, config.interval, frames, now)
    except KeyboardInterrupt:
        logger.info("interrupted")
        # interrupting is the only way to stop an endless run
        return 0 if frames is None else 1
    logger.info("drew %d frame(s) to %s", count, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
