"""
SwipeType - Swipe-to-type gesture decoder

Entry point: replays a recorded swipe trace and prints the decoded word.
"""
import argparse
import dataclasses
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="SwipeType - Swipe-to-type gesture decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "trace",
        type=Path,
        help="YAML trace file: list of {x, y, t} samples in keyboard coordinates",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: config.yaml)",
    )

    parser.add_argument(
        "--layout",
        choices=["qwerty", "symbols"],
        default=None,
        help="Keyboard layout (overrides config)",
    )

    parser.add_argument(
        "--dictionary",
        type=Path,
        default=None,
        help="Word list (.json or .txt) used to rank suggestions (overrides config)",
    )

    parser.add_argument(
        "--no-dictionary",
        action="store_true",
        help="Skip dictionary ranking and print only the raw decoded word",
    )

    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Max number of suggestions (overrides config)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging of decode decisions",
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    import yaml
    from swipe import SwipeEngine, load_config, load_trace, replay
    from keymap import get_layout, get_key_rects
    from prediction import load_dictionary

    config = load_config(args.config)

    # Apply CLI overrides
    if args.layout:
        config.keyboard.layout = args.layout
    if args.dictionary:
        config.dictionary.path = str(args.dictionary)
    if args.limit is not None:
        # replace() re-runs SwipeConfig validation
        try:
            config.swipe = dataclasses.replace(config.swipe, suggestion_limit=args.limit)
        except ValueError as e:
            print(f"ERROR: Invalid --limit: {e}")
            return 1

    geometry = get_key_rects(
        get_layout(config.keyboard.layout),
        config.keyboard.width,
        config.keyboard.height,
    )
    dictionary = None
    if not args.no_dictionary:
        dictionary = load_dictionary(config.dictionary.path)

    try:
        samples = load_trace(args.trace)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: Could not load trace {args.trace}: {e}")
        return 1

    print("SwipeType decoding...")
    print(f"  Layout: {config.keyboard.layout}")
    print(f"  Samples: {len(samples)}")
    print()

    engine = SwipeEngine(config.swipe)
    replay(engine, samples)

    stats = engine.analyze_gesture(geometry)
    print(f"Valid swipe: {engine.is_valid_swipe()}")
    print(f"Path length: {stats.total_path_length:.1f}")
    print(f"Duration: {stats.duration_ms} ms")
    print(f"Keys visited: {stats.visit_count}")

    suggestions = engine.suggest(geometry, dictionary)
    word = engine.end_swipe(geometry)

    if word is None:
        print("Word: (none)")
        return 2

    print(f"Word: {word}")
    if dictionary is not None:
        print(f"Suggestions: {', '.join(suggestions) if suggestions else '(none)'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
