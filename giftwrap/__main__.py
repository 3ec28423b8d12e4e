"""
Compute a gift wrapping trace from the command line.

Usage:
  python -m giftwrap --points "0,0
10,0
10,10
0,10"
  python -m giftwrap --random 12 --seed 3 --verbose --animate
"""
import argparse
import sys
from pathlib import Path

from giftwrap.playback import describe_step
from giftwrap.points_input import (DEFAULT_RANDOM_COUNT, format_points,
                                   generate_random_points, parse_points)
from giftwrap.preconditions import MAX_POINTS
from giftwrap.wrapping import compute_hull_trace, hull_shape, hull_vertices


def build_parser():
    ap = argparse.ArgumentParser(prog='giftwrap', description="Trace the gift wrapping convex hull algorithm.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--points", help="Points as 'x,y' lines")
    src.add_argument("--file", type=Path, help="File with one 'x,y' point per line")
    src.add_argument("--random", type=int, metavar="N", help=f"Generate N random points (1-{MAX_POINTS})")
    ap.add_argument("--seed", type=int, default=None, help="Seed for --random")
    ap.add_argument("--verbose", action="store_true", help="Print every step of the trace")
    ap.add_argument("--animate", action="store_true", help="Replay the trace with matplotlib")
    ap.add_argument("--interval", type=int, default=None, help="Milliseconds between animation frames")
    return ap


def load_points(args):
    if args.points is not None:
        return parse_points(args.points)
    if args.file is not None:
        return parse_points(args.file.read_text())
    count = DEFAULT_RANDOM_COUNT if args.random is None else args.random
    if not 1 <= count <= MAX_POINTS:
        raise ValueError(f"--random must be between 1 and {MAX_POINTS}, got {count}")
    return generate_random_points(count, seed=args.seed)


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        points = load_points(args)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    trace = compute_hull_trace(points)

    print("Points:")
    print(format_points(points))
    if args.verbose:
        print("\nSteps:")
        for i, step in enumerate(trace):
            print(describe_step(i, step))

    vertices = hull_vertices(trace)
    print(f"\nShape: {hull_shape(trace)}")
    print("Convex Hull Points (in order):")
    for pt in vertices:
        print(tuple(pt))

    if args.animate:
        import matplotlib.pyplot as plt
        from giftwrap.animator import DEFAULT_INTERVAL, animate_trace

        interval = DEFAULT_INTERVAL if args.interval is None else args.interval
        fig, ani = animate_trace(points, trace, interval=interval)
        plt.tight_layout()
        plt.show()
    return 0


if __name__ == '__main__':
    sys.exit(main())
