"""Entry point for playbook package."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path


def main() -> None:
    """Main entry point for the Playbook application."""
    parser = argparse.ArgumentParser(
        description="Playbook - American Football Play Designer",
        prog="playbook",
    )
    parser.add_argument(
        "--api",
        action="store_true",
        help="Serve the HTTP API instead of the TUI",
    )
    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="API host (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="API port (default: 8000)",
    )
    parser.add_argument(
        "--mode",
        choices=["move", "design"],
        default=None,
        help="Starting interaction mode (default: move)",
    )
    parser.add_argument(
        "--import",
        dest="import_path",
        type=Path,
        default=None,
        help="Load a play from a JSON file at startup",
    )
    parser.add_argument(
        "--export",
        dest="export_path",
        type=str,
        default="play.json",
        help="Where the TUI writes exported plays (default: play.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.getenv("PLAYBOOK_LOG_LEVEL", "WARNING"),
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.api:
        from playbook.api.main import run_api

        run_api(host=args.host, port=args.port)
        return

    from playbook.editor import EditorSession
    from playbook.exchange import import_play
    from playbook.ui.app import run_app

    session = EditorSession(mode=args.mode).build()
    if args.import_path is not None:
        try:
            text = args.import_path.read_text(encoding="utf-8")
        except OSError as e:
            print(f"Cannot read {args.import_path}: {e}", file=sys.stderr)
            sys.exit(1)
        try:
            import_play(session, text)
        except (json.JSONDecodeError, TypeError) as e:
            print(f"Cannot import {args.import_path}: {e}", file=sys.stderr)
            sys.exit(1)

    run_app(session=session, export_path=args.export_path)


if __name__ == "__main__":
    main()
