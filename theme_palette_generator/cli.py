import argparse
import json
import logging

from .color import is_valid_hex
from .formats import COLOR_FORMATS
from .harmony import MODE_CHOICES
from .image import extract_seed_color
from .oklch import generate_scale, to_oklch
from .palette import derive_mode, generate, generate_best, load_tokens_from_json
from .report import generate_readability_report, print_palette
from .scoring import evaluate_palette


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate paired light/dark UI themes in OKLCH"
    )
    parser.add_argument(
        "--mode", "-m",
        choices=MODE_CHOICES,
        default="random",
        help="Harmony mode (default: random)",
    )
    parser.add_argument(
        "--seed-color", "-c",
        metavar="HEX",
        help="Seed color such as #3B82F6; fixes the base hue and makes output reproducible",
    )
    parser.add_argument(
        "--image",
        metavar="PATH",
        help="Take the seed color from the dominant colors of an image",
    )
    for name in ("saturation", "contrast", "brightness"):
        parser.add_argument(
            f"--{name}",
            type=int,
            default=0,
            metavar="LEVEL",
            help=f"{name.title()} level from -5 to 5 (default: 0)",
        )
    parser.add_argument(
        "--override",
        metavar="HEXES",
        help="Five comma-separated hex colors overriding the primary, secondary, "
        "accent, good and bad hues; leave a slot empty to keep the computed hue",
    )
    parser.add_argument(
        "--dark-first",
        action="store_true",
        help="Build the dark theme first and derive the light theme from it",
    )
    parser.add_argument(
        "--seed",
        help="Random seed used when no seed color is given",
    )
    parser.add_argument(
        "--best-of",
        type=int,
        default=1,
        metavar="N",
        help="Generate N candidates and keep the best scoring one",
    )
    parser.add_argument(
        "--from-palette",
        metavar="JSON",
        help="Load one theme from a JSON file and derive the opposite mode",
    )
    parser.add_argument(
        "--format", "-f",
        choices=COLOR_FORMATS,
        default="hex",
        help="Color notation for the palette listing (default: hex)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of the palette listing",
    )
    parser.add_argument(
        "--scale",
        action="store_true",
        help="Also print the 50-900 scale of the primary color",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log generation details",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate arguments
    if args.seed_color and args.image:
        parser.error("Cannot use both --seed-color and --image")
    if args.seed_color and not is_valid_hex(args.seed_color):
        parser.error("--seed-color must be a hex color like #FF5733")
    for name in ("saturation", "contrast", "brightness"):
        if not -5 <= getattr(args, name) <= 5:
            parser.error(f"--{name} must be between -5 and 5")
    if args.best_of < 1:
        parser.error("--best-of must be at least 1")

    override = None
    if args.override is not None:
        override = [value.strip() for value in args.override.split(",")]
        if len(override) != 5:
            parser.error("--override needs exactly five comma-separated entries")
        for value in override:
            if value and not is_valid_hex(value):
                parser.error(f"--override entry {value!r} is not a hex color")

    if args.from_palette:
        _run_from_palette(args)
    else:
        _run_generate(args, override)


def _run_from_palette(args):
    """Derive the opposite mode from an existing theme JSON file."""
    print(f"Loading palette: {args.from_palette}")
    try:
        source, is_dark_theme = load_tokens_from_json(args.from_palette)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Cannot load {args.from_palette}: {e}")

    variant = "dark" if is_dark_theme else "light"
    print(f"Detected theme type: {variant}")

    target = "light" if is_dark_theme else "dark"
    derived = derive_mode(source, target, brightness_level=args.brightness)
    light, dark = (derived, source) if is_dark_theme else (source, derived)

    if args.json:
        print(json.dumps({"light": light.as_dict(), "dark": dark.as_dict()}, indent=2))
        return

    _print_theme(light, False, args.format)
    _print_theme(dark, True, args.format)


def _run_generate(args, override):
    """Generate a light/dark theme pair from the command line options."""
    seed_color = args.seed_color
    if args.image:
        print(f"Analyzing: {args.image}")
        seed_color = extract_seed_color(args.image)
        print(f"Seed color: {seed_color}")

    options = dict(
        mode=args.mode,
        seed_color=seed_color,
        saturation_level=args.saturation,
        contrast_level=args.contrast,
        brightness_level=args.brightness,
        override_palette=override,
        dark_first=args.dark_first,
    )
    if args.best_of > 1:
        result = generate_best(attempts=args.best_of, rng_seed=args.seed, **options)
    else:
        result = generate(rng_seed=args.seed, **options)

    if args.json:
        print(json.dumps(result.as_dict(), indent=2))
        return

    _print_theme(result.light, False, args.format)
    _print_theme(result.dark, True, args.format)

    score = evaluate_palette(
        result.dark if args.dark_first else result.light, result.base_hue, result.mode
    )
    print("\n" + "=" * 60)
    print(f"Mode:     {result.mode}")
    print(f"Seed:     {result.seed}")
    print(f"Base hue: {result.base_hue:.1f}")
    print(
        f"Score:    {score.total:.1f} (contrast {score.contrast:.1f}, "
        f"distinction {score.distinction:.1f}, harmony {score.harmony:.1f})"
    )
    if args.scale:
        print("\nPrimary scale:")
        for step, hex_color in generate_scale(to_oklch(result.light.primary)).items():
            print(f"  {step:>3} {hex_color}")
    print("=" * 60)


def _print_theme(tokens, is_dark_theme, color_format):
    print_palette(tokens, is_dark_theme, color_format=color_format)
    report, _ = generate_readability_report(tokens, is_dark_theme)
    print("\n" + report)


if __name__ == "__main__":
    main()
