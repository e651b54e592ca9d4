"""
CLI entry point for the squash court visualiser.
"""
import argparse
import logging
import sys

from squash_viz import config
from squash_viz.ball import OverlapPolicy
from squash_viz.models import CourtDimensions, CourtDimensionsError, Handedness, ShotStyle
from squash_viz.pipeline import Pipeline


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a scripted squash shot on a 3D court",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        "--hand",
        choices=[h.value for h in Handedness],
        default=Handedness.FOREHAND.value,
        help="Side the shot is played from"
    )

    parser.add_argument(
        "--shot",
        choices=[s.value for s in ShotStyle],
        default=ShotStyle.STRAIGHT.value,
        help="Shot to play"
    )

    parser.add_argument(
        "--output", "-o",
        default=str(config.RESULTS_DIR),
        help="Output directory for results"
    )

    parser.add_argument(
        "--name", "-n",
        default=None,
        help="Base name for output files (default: <hand>_<shot>)"
    )

    parser.add_argument(
        "--fps",
        type=float,
        default=config.RENDER_FPS,
        help="Frames per second of the simulation and video"
    )

    parser.add_argument(
        "--width",
        type=int,
        default=config.FRAME_WIDTH,
        help="Video frame width in pixels"
    )

    parser.add_argument(
        "--height",
        type=int,
        default=config.FRAME_HEIGHT,
        help="Video frame height in pixels"
    )

    parser.add_argument(
        "--labels",
        action="store_true",
        help="Draw wall and marking labels"
    )

    parser.add_argument(
        "--policy",
        choices=[p.value for p in OverlapPolicy],
        default=OverlapPolicy.CANCEL.value,
        help="What a new shot does to one still in flight"
    )

    parser.add_argument(
        "--dimensions",
        type=str,
        default=None,
        help="JSON file with court dimensions (default: regulation court)"
    )

    parser.add_argument(
        "--no-video",
        action="store_true",
        help="Don't render the output video"
    )

    parser.add_argument(
        "--no-json",
        action="store_true",
        help="Don't save JSON geometry and trajectory data"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress progress bar"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging"
    )

    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Court dimensions
    dimensions = None
    if args.dimensions:
        try:
            dimensions = CourtDimensions.from_json(args.dimensions)
        except (FileNotFoundError, CourtDimensionsError) as e:
            print(f"Error: {e}")
            sys.exit(1)

    try:
        pipeline = Pipeline(
            output_dir=args.output,
            dimensions=dimensions,
            fps=args.fps,
            frame_size=(args.width, args.height),
            show_labels=args.labels,
            save_video=not args.no_video,
            save_json=not args.no_json,
            show_progress=not args.quiet,
            policy=OverlapPolicy(args.policy),
        )
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    handedness = Handedness(args.hand)
    style = ShotStyle(args.shot)

    print(f"Shot: {handedness.to_string()} {style.to_string()}")
    print(f"Output directory: {args.output}")

    try:
        result = pipeline.process(handedness, style, output_name=args.name)

        # Print summary
        print("\n--- Simulation Complete ---")
        print(f"Frames rendered: {len(result.frames)}")
        print(f"Shot duration: {result.total_duration_ms:.0f} ms")
        x, y, z = result.final_ball
        print(f"Ball came to rest at: ({x:.3f}, {y:.3f}, {z:.3f})")

    except KeyboardInterrupt:
        print("\nRendering interrupted by user.")
        sys.exit(0)
    except Exception as e:
        print(f"Error during rendering: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
