"""Command-line interface: generate a demo arrangement and preview it."""
import argparse
import logging
import math
import sys
from typing import Optional, Sequence

from phyllotaxis.config import DEFAULT_STEP_SIZE
from phyllotaxis.errors import PhyllotaxisError
from phyllotaxis.generators import generate
from phyllotaxis.logging_config import setup_logging
from phyllotaxis.model.curves import ArcCurve, BezierCurve, CompositeCurve, Curve, LineCurve
from phyllotaxis.model.geometry_primitives import Point
from phyllotaxis.model.parameters import (
    ConicalParams,
    CylindricalParams,
    EllipsoidalParams,
    GeneratorParams,
    PhyllotaxisModel,
    PlanarParams,
    RevolutionParams,
    SphericalParams,
)

logger = logging.getLogger("phyllotaxis.cli")

PROFILES = ("sphere", "vase", "cylinder")


def build_profile(name: str) -> Curve:
    """Demo profile curves, all running bottom to top."""
    match name:
        case "sphere":
            return ArcCurve(center=Point(0.0, 0.0, 0.0), radius=10.0,
                            start_angle=-math.pi / 2, end_angle=math.pi / 2)
        case "vase":
            body = BezierCurve(Point(0.0, 0.0, 0.0), Point(12.0, 0.0, 0.0),
                               Point(14.0, 0.0, 12.0), Point(5.0, 0.0, 18.0))
            neck = LineCurve(Point(5.0, 0.0, 18.0), Point(6.0, 0.0, 24.0))
            return CompositeCurve([body, neck])
        case "cylinder":
            return LineCurve(Point(10.0, 0.0, 0.0), Point(10.0, 0.0, 20.0))
        case _:
            raise ValueError(f"Unknown profile '{name}'")


def build_params(args: argparse.Namespace, curve: Curve) -> GeneratorParams:
    match PhyllotaxisModel(args.model):
        case PhyllotaxisModel.PLANAR:
            return PlanarParams(organs=args.organs, radius=10.0)
        case PhyllotaxisModel.CYLINDRICAL:
            return CylindricalParams(organs=args.organs, radius=10.0, rise=20.0 / max(args.organs, 1))
        case PhyllotaxisModel.CONICAL:
            return ConicalParams(organs=args.organs, base_radius=10.0, height=20.0)
        case PhyllotaxisModel.SPHERICAL:
            return SphericalParams(organs=args.organs, radius=10.0)
        case PhyllotaxisModel.ELLIPSOIDAL:
            return EllipsoidalParams(organs=args.organs, radius_x=10.0, radius_y=10.0, radius_z=15.0)
        case PhyllotaxisModel.REVOLUTION:
            return RevolutionParams(curve=curve, organ_size=args.organ_size, step_size=args.step_size)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="phyllotaxis", description="Generate and preview phyllotaxis point sets.")
    parser.add_argument("--model", choices=[m.value for m in PhyllotaxisModel], default=PhyllotaxisModel.REVOLUTION.value)
    parser.add_argument("--profile", choices=PROFILES, default="vase", help="Profile curve for the revolution model")
    parser.add_argument("--organs", type=int, default=300, help="Organ count for the closed-form models")
    parser.add_argument("--organ-size", type=float, default=0.8)
    parser.add_argument("--step-size", type=float, default=DEFAULT_STEP_SIZE)
    parser.add_argument("--plot-profile", action="store_true", help="Plot the profile curve before packing")
    parser.add_argument("--no-show", action="store_true", help="Only log the organ count")
    parser.add_argument("--screenshot", type=str, default=None)
    parser.add_argument("--log-file", type=str, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    curve = build_profile(args.profile)
    if args.plot_profile:
        curve.plot()

    try:
        params = build_params(args, curve)
        points = generate(params)
    except PhyllotaxisError as e:
        logger.error(f"Generation failed: {e}")
        return 1

    logger.info(f"Generated {len(points)} organs with the {params.MODEL} model.")

    if not args.no_show:
        # PyVista is only needed for the preview
        from phyllotaxis.view.preview import show_organs
        show_organs(
            points,
            organ_size=args.organ_size,
            curve=curve if isinstance(params, RevolutionParams) else None,
            off_screen=args.screenshot is not None,
            screenshot=args.screenshot,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
