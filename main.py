import argparse
import sys
import traceback

from frameRenderer import FrameRenderer, OUTPUT_DIR
from simulation import PRESETS, create_simulation


def build_parser():
    parser = argparse.ArgumentParser(
        description="Single particle under gravity, semi-implicit Euler integration"
    )
    parser.add_argument(
        "--preset",
        choices=list(PRESETS.keys()),
        default="basic",
        help="Particle configuration (default: basic)",
    )
    parser.add_argument("--steps", type=int, default=None, help="Maximum number of steps")
    parser.add_argument("--dt", type=float, default=None, help="Time step in seconds")
    parser.add_argument("--mass", type=float, default=None, help="Particle mass")

    lifecycle = parser.add_mutually_exclusive_group()
    lifecycle.add_argument("--lifespan", type=float, default=None, help="Lifespan in seconds")
    lifecycle.add_argument(
        "--no-lifecycle", action="store_true", help="Particle never dies"
    )

    parser.add_argument(
        "--trail",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Record the last positions of the particle",
    )
    parser.add_argument(
        "--render", action="store_true", help="Save one PNG frame per step"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=OUTPUT_DIR,
        help=f"Frame output directory (default: {OUTPUT_DIR})",
    )
    parser.add_argument(
        "--gif", type=str, default=None, help="Also save the frames as an animated GIF"
    )
    parser.add_argument(
        "--delay", type=float, default=None, help="Seconds to wait between frames"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Do not print the state after each step"
    )
    return parser


def main(argv=None) -> int:
    """Función principal"""
    args = build_parser().parse_args(argv)

    try:
        overrides = {}
        if args.steps is not None:
            overrides["max_steps"] = args.steps
        if args.dt is not None:
            overrides["dt"] = args.dt
        if args.mass is not None:
            overrides["mass"] = args.mass
        if args.lifespan is not None:
            overrides["lifespan"] = args.lifespan
        if args.no_lifecycle:
            overrides["lifespan"] = None
        if args.trail is not None:
            overrides["track_trail"] = args.trail
        if args.delay is not None:
            overrides["frame_delay"] = args.delay

        renderer = None
        if args.render or args.gif or PRESETS[args.preset].get("render"):
            renderer = FrameRenderer(output_dir=args.output, keep_frames=bool(args.gif))

        simulation = create_simulation(
            args.preset, renderer=renderer, verbose=not args.quiet, **overrides
        )
        steps = simulation.run()

        particle = simulation.particle
        state = "dead" if particle.is_dead else "alive"
        print(f"Finished after {steps} steps ({state}, age={particle.age:.2f}s)")

        if renderer is not None:
            print(f"Saved {len(renderer.frame_paths)} frames to {args.output}")
            if args.gif:
                renderer.save_animation(args.gif)
                print(f"Saved: {args.gif}")
    except Exception as e:
        print(f"Error: {e}")
        traceback.print_exc()
        return 1

    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
