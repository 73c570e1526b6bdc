"""CLI for radial-hierarchy."""

import argparse
import logging
from pathlib import Path

import yaml

from .config import DEFAULTS, load_config, parse_alignment, view_from_settings
from .gesture import DragEvent, GesturePhase, MagnifyEvent
from .hierarchy import Hierarchy, load_elements
from .layout.alignment import LabelAlignment
from .layout.metrics import make_measure
from .logging_config import setup_logging
from .session import RadialSession
from .visualize import generate_html, generate_json

# Settings that may come from the config file or the command line
SETTING_KEYS = ["width", "height", "radius", "rotation", "alignment", "labels-angle", "font-size"]


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments shared between subcommands."""
    parser.add_argument("--hierarchy", type=Path, help="YAML/JSON list of {caption, depth} entries")
    parser.add_argument("--config", type=Path, help="Path to YAML config file")
    parser.add_argument(
        "--open",
        type=str,
        action="append",
        metavar="CAPTION",
        help="Descend into the child with this caption (can be repeated)",
    )
    parser.add_argument("--width", type=float, help="Canvas width in pixels (default: 800)")
    parser.add_argument("--height", type=float, help="Canvas height in pixels (default: 600)")
    parser.add_argument("--radius", type=float, help="Signed ring radius in -0.8..0.8 (default: 0.4)")
    parser.add_argument("--rotation", type=float, help="Ring rotation in degrees (default: 0)")
    parser.add_argument(
        "--alignment",
        choices=[a.value for a in LabelAlignment],
        help="Which label edge sits on the ring (default: leading)",
    )
    parser.add_argument("--labels-angle", type=float, help="Extra rotation for every label")
    parser.add_argument("--font-size", type=float, help="Label font size in pixels (default: 14)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def resolve_settings(args: argparse.Namespace, parser: argparse.ArgumentParser) -> dict:
    """Merge defaults, config file and command line into one settings dict.

    Command-line values win over the config file, which wins over DEFAULTS.
    """
    settings = dict(DEFAULTS)

    if args.config:
        try:
            config = load_config(args.config)
        except (OSError, ValueError, yaml.YAMLError) as err:
            parser.error(f"Cannot read config: {err}")
        settings.update({k: v for k, v in config.items() if k in SETTING_KEYS})
        if not args.hierarchy and "hierarchy" in config:
            args.hierarchy = Path(config["hierarchy"])
        if not args.open and "open" in config:
            val = config["open"]
            args.open = val if isinstance(val, list) else [val]
        if getattr(args, "output", None) is None and "output" in config:
            args.output = Path(config["output"])

    for key in SETTING_KEYS:
        value = getattr(args, key.replace("-", "_"), None)
        if value is not None:
            settings[key] = value

    if not args.hierarchy:
        parser.error("--hierarchy is required")

    return settings


def build_session(
    args: argparse.Namespace, parser: argparse.ArgumentParser, settings: dict
) -> RadialSession:
    """Load the hierarchy and open the requested path."""
    try:
        hierarchy = Hierarchy.from_elements(load_elements(args.hierarchy))
        session = RadialSession(
            hierarchy,
            canvas_size=(float(settings["width"]), float(settings["height"])),
            view=view_from_settings(settings),
            measure=make_measure(float(settings["font-size"])),
            labels_angle=float(settings["labels-angle"]),
        )
    except (OSError, ValueError, TypeError, KeyError, yaml.YAMLError) as err:
        parser.error(str(err))

    for caption in args.open or []:
        match = next(
            (node for node in session.siblings() if node.caption.strip() == caption.strip()),
            None,
        )
        if match is None:
            available = ", ".join(node.caption.strip() for node in session.siblings())
            parser.error(f"No child named '{caption}' (available: {available or 'none'})")
        session.open(match.index)

    return session


def apply_event(session: RadialSession, event: dict) -> None:
    """Apply one recorded input event to a session.

    Raises:
        ValueError: If the event type or fields are invalid.
    """
    kind = event.get("type")

    if kind == "drag":
        phase = GesturePhase(event.get("phase", "change"))
        position = (float(event.get("x", 0)), float(event.get("y", 0)))
        session.handle_drag(DragEvent(phase, position))
    elif kind == "magnify":
        phase = GesturePhase(event.get("phase", "change"))
        session.handle_magnify(MagnifyEvent(phase, float(event.get("scale", 1.0))))
    elif kind == "tap":
        session.tap((float(event["x"]), float(event["y"])))
    elif kind == "hover":
        session.hover((float(event["x"]), float(event["y"])))
    elif kind == "back":
        session.back()
    elif kind == "jump":
        caption = str(event["caption"]).strip()
        for index in session.navigation.breadcrumb():
            if (session.hierarchy.caption(index) or "").strip() == caption:
                session.jump_to(index)
                break
    elif kind == "advance":
        session.advance(float(event.get("dt", 0)))
    elif kind == "align":
        session.set_alignment(parse_alignment(event["alignment"]))
    else:
        raise ValueError(f"Unknown event type: {kind!r}")


def print_state(session: RadialSession) -> None:
    """Print the ring state and breadcrumb."""
    frame = session.frame()
    trail = " > ".join(caption.strip() for _, caption in frame.breadcrumb) or "(top level)"
    print(f"Path: {trail}")
    print(f"Rotation: {frame.rotation:.2f} deg")
    print(f"Radius: {frame.radius:.3f}")
    print(f"Labels: {len(frame.labels)}")


def cmd_layout(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Print or write the current frame as JSON."""
    settings = resolve_settings(args, parser)
    session = build_session(args, parser, settings)

    text = generate_json(session, args.output)
    if args.output:
        print(f"Wrote {args.output}")
    else:
        print(text)


def cmd_render(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Write an HTML snapshot of the current frame."""
    settings = resolve_settings(args, parser)
    if args.output is None:
        parser.error("--output is required")
    if args.output.suffix != ".html":
        parser.error("--output must end in .html")
    session = build_session(args, parser, settings)

    generate_html(session, args.output, title=args.title, font_size=float(settings["font-size"]))
    print(f"Wrote {args.output}")


def cmd_replay(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Replay recorded input events against a session."""
    settings = resolve_settings(args, parser)
    if args.output is not None and args.output.suffix != ".html":
        parser.error("--output must end in .html")
    session = build_session(args, parser, settings)

    try:
        with open(args.events) as f:
            events = yaml.safe_load(f) or []
    except (OSError, yaml.YAMLError) as err:
        parser.error(f"Cannot read events: {err}")
    if not isinstance(events, list):
        parser.error("Events file must hold a list of events")

    for i, event in enumerate(events):
        try:
            apply_event(session, event)
        except (ValueError, KeyError, TypeError, AttributeError) as err:
            parser.error(f"Event {i + 1}: {err}")

    print(f"Replayed {len(events)} events")
    print_state(session)

    if args.output:
        generate_html(session, args.output, font_size=float(settings["font-size"]))
        print(f"Wrote {args.output}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for radial-hierarchy CLI."""
    parser = argparse.ArgumentParser(
        description="Lay out and explore a hierarchy as an interactive radial ring"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    layout_parser = subparsers.add_parser("layout", help="Print the label layout as JSON")
    add_common_args(layout_parser)
    layout_parser.add_argument("--output", type=Path, help="Optional JSON output path")

    render_parser = subparsers.add_parser("render", help="Render an HTML snapshot with pyvis")
    add_common_args(render_parser)
    render_parser.add_argument("--output", type=Path, help="Output HTML file")
    render_parser.add_argument("--title", type=str, help="Page heading")

    replay_parser = subparsers.add_parser(
        "replay", help="Apply recorded gesture and navigation events"
    )
    add_common_args(replay_parser)
    replay_parser.add_argument(
        "--events", type=Path, required=True, help="YAML/JSON list of events"
    )
    replay_parser.add_argument("--output", type=Path, help="Optional HTML snapshot of the result")

    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        setup_logging(logging.DEBUG)

    if args.command == "layout":
        cmd_layout(args, layout_parser)
    elif args.command == "render":
        cmd_render(args, render_parser)
    elif args.command == "replay":
        cmd_replay(args, replay_parser)
    else:
        # No subcommand provided - show help
        parser.print_help()


if __name__ == "__main__":
    main()
