#!/usr/bin/env python3
"""TypeFollow - follow-typing practice application."""

import argparse
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from utils.config import Config

log = logging.getLogger('typefollow')


def setup_logging(level: str) -> None:
    """Log to a rotating file in the XDG state directory and to stderr."""
    xdg_state_home = os.environ.get('XDG_STATE_HOME', str(Path.home() / '.local' / 'state'))
    log_dir = Path(xdg_state_home) / 'typefollow'
    log_dir.mkdir(parents=True, exist_ok=True)

    # 5MB max, keep 5 backups
    file_handler = RotatingFileHandler(
        log_dir / 'typefollow.log',
        maxBytes=5*1024*1024,
        backupCount=5
    )

    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            file_handler,
            logging.StreamHandler()
        ]
    )


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Follow-typing practice')
    parser.add_argument(
        'passage',
        nargs='?',
        type=Path,
        help='Text file with the passage to practice'
    )
    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Settings file (default: $XDG_CONFIG_HOME/typefollow/settings.json)'
    )
    parser.add_argument(
        '--set',
        action='append',
        default=[],
        metavar='KEY=VALUE',
        help='Change and save a setting (repeatable), e.g. --set font_size=24'
    )
    parser.add_argument(
        '--reset-settings',
        action='store_true',
        help='Restore and save default settings'
    )
    parser.add_argument(
        '--show-settings',
        action='store_true',
        help='Print current settings as JSON and exit'
    )
    return parser.parse_args(argv)


def parse_setting(assignment: str) -> tuple[str, Any]:
    """Split KEY=VALUE, decoding VALUE as JSON when possible.

    Raises:
        ValueError: No '=' in the assignment
    """
    key, sep, raw = assignment.partition('=')
    if not sep or not key.strip():
        raise ValueError(f"Expected KEY=VALUE, got {assignment!r}")

    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return key.strip(), value


def apply_settings_args(config: Config, args: argparse.Namespace) -> None:
    """Apply --reset-settings and --set options to the config.

    Raises:
        ValueError: Malformed assignment
        KeyError: Unknown setting
        pydantic.ValidationError: Invalid value
    """
    if args.reset_settings:
        config.reset()
        log.info("Settings reset to defaults")

    for assignment in args.set:
        key, value = parse_setting(assignment)
        config.set(key, value)
        log.info(f"Setting {key} = {config.get(key)!r}")


def main(argv: list[str] | None = None) -> int:
    """Run the practice window."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    config = Config(args.config)

    try:
        apply_settings_args(config, args)
    except (ValueError, KeyError) as e:
        # pydantic.ValidationError is a ValueError
        print(f"Invalid setting: {e}", file=sys.stderr)
        return 2

    if args.show_settings:
        print(json.dumps(config.get_all(), indent=2))
        return 0

    setup_logging(config.get('log_level'))

    from PySide6.QtWidgets import QApplication
    from ui.practice_window import PracticeWindow

    app = QApplication(sys.argv)
    window = PracticeWindow(config.settings)

    if args.passage:
        try:
            window.load_passage(args.passage.read_text(encoding='utf-8').strip())
        except OSError as e:
            log.error(f"Cannot read passage file {args.passage}: {e}")
            return 1

    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
