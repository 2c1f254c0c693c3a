"""
Command-line interface for the pulley transmission calculator.
"""

import argparse
import logging
import sys
from pathlib import Path

from ..enums import SystemMode
from ..io.loaders import PulleyConfig, load_config_json, save_config_json
from ..calculator.core import (
    calculate_transmission,
    generate_response_curve,
    get_applications,
)
from ..calculator.validation import validate_config, clamp_centre_distance
from ..calculator.output import to_json, to_markdown, to_summary
from ..analysis.narrative import analyze_system


def build_config(args) -> PulleyConfig:
    """Start from --config (or defaults) and apply any explicit overrides."""
    if args.config:
        config = load_config_json(args.config)
    else:
        config = PulleyConfig()

    overrides = {
        'driver_diameter_mm': args.driver,
        'driven_diameter_mm': args.driven,
        'input_rpm': args.rpm,
        'input_power_w': args.power,
        'centre_distance_mm': args.centre_distance,
        'mode': SystemMode(args.mode) if args.mode else None,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        config = PulleyConfig.model_validate({**config.model_dump(), **overrides})

    if args.auto_centre_distance:
        config = clamp_centre_distance(config)

    return config


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="pulleysim-calc",
        description="Steady-state speed, torque and belt length of a two-pulley drive",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Friction wheels, 100 mm driving 200 mm at 120 RPM and 500 W
  pulleysim-calc --driver 100 --driven 200 --rpm 120 --power 500

  # Belt drive with 300 mm between centres, as JSON
  pulleysim-calc --mode belt --centre-distance 300 --format json

  # Markdown report including the driven-diameter response curve
  pulleysim-calc --driver 150 --format markdown --curve

  # Load a saved configuration and ask for an AI commentary
  pulleysim-calc --config drive.json --analyze
        """
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='JSON configuration file (explicit options override its values)'
    )

    parser.add_argument('--driver', type=float, default=None,
                        help='Driver pulley diameter in mm (default: 100)')
    parser.add_argument('--driven', type=float, default=None,
                        help='Driven pulley diameter in mm (default: 200)')
    parser.add_argument('--rpm', type=float, default=None,
                        help='Input speed in RPM (default: 120)')
    parser.add_argument('--power', type=float, default=None,
                        help='Input power in W (default: 500)')
    parser.add_argument('--centre-distance', type=float, default=None,
                        help='Centre distance in mm, belt mode only (default: 300)')

    parser.add_argument(
        '--mode',
        choices=[m.value for m in SystemMode],
        default=None,
        help='Coupling: friction wheels or belt (default: friction)'
    )

    parser.add_argument(
        '--auto-centre-distance',
        action='store_true',
        help='In belt mode, raise a centre distance below D1 + D2 up to D1 + D2'
    )

    parser.add_argument(
        '--format',
        choices=['summary', 'json', 'markdown'],
        default='summary',
        help='Output format (default: summary)'
    )

    parser.add_argument(
        '--curve',
        action='store_true',
        help='Include the driven-diameter response curve (json/markdown)'
    )

    parser.add_argument(
        '--analyze',
        action='store_true',
        help='Request a narrative analysis (needs GEMINI_API_KEY)'
    )

    parser.add_argument(
        '--save',
        type=str,
        default=None,
        help='Save the resulting configuration to a JSON file'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = build_config(args)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    result = calculate_transmission(config)
    validation = validate_config(config)
    curve = generate_response_curve(config) if args.curve else None

    if args.format == 'json':
        print(to_json(
            config,
            result,
            validation=validation,
            curve=curve,
            applications=get_applications(result.ratio),
        ))
    elif args.format == 'markdown':
        print(to_markdown(config, result, validation, curve=curve))
    else:
        print(to_summary(config, result))
        for msg in validation.errors + validation.warnings:
            print(f"  {msg.severity.value.upper()}: {msg.message}", file=sys.stderr)

    if args.analyze:
        print("\nAnalysis:")
        print(analyze_system(config, result))

    if args.save:
        output_path = Path(args.save)
        save_config_json(config, output_path)
        print(f"\nSaved configuration: {output_path}", file=sys.stderr)

    return 0 if validation.valid else 1


if __name__ == '__main__':
    sys.exit(main())
