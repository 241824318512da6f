#!/usr/bin/env python3
"""
Command-line entry point for the number game.

Usage examples:
  # Interactive play
  numguess

  # Scripted run with a fixed seed, writing a JSON transcript
  numguess --seed 123 --commands "start" "guess 5" "save" --out run.json

Settings come from config/*.json, then NUMGUESS_* environment variables
(a .env file in the working directory is honoured), then these flags.
"""
import argparse
import json
import random
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from numguess import __version__
from numguess.base.commands import MSG_STARTED
from numguess.base.config import GameConfig
from numguess.base.game_manager import GameManager
from numguess.terminal.adapter import TerminalAdapter
from numguess.utils.logging_config import get_logger, setup_logging

logger = get_logger("SYSTEM")


def parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="numguess", description="Guess the secret number.")
    p.add_argument("--version", action="version", version=f"numguess v{__version__}")
    p.add_argument("--seed", type=int, default=None, help="Random seed for determinism")
    p.add_argument("--min", dest="min_number", type=int, default=None, help="Lowest possible number")
    p.add_argument("--max", dest="max_number", type=int, default=None, help="Highest possible number")
    p.add_argument("--save-path", default=None, help="Save file location")
    p.add_argument("--config-dir", default=None, help="Directory holding the JSON config files")
    p.add_argument("--no-autostart", action="store_true", help="Wait for 'start' instead of starting a game at launch")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")

    p.add_argument("--commands", nargs="*", default=None, help="Commands to send in order instead of reading stdin")
    p.add_argument("--out", default=None, help="Optional path to write a JSON transcript of a --commands run")
    return p.parse_args(argv)


def build_config(ns: argparse.Namespace) -> GameConfig:
    """Load configuration and layer the command-line flags on top."""
    config = GameConfig(config_dir=ns.config_dir)
    if ns.min_number is not None:
        config.set("game.min_number", ns.min_number)
    if ns.max_number is not None:
        config.set("game.max_number", ns.max_number)
    if ns.save_path:
        config.set("system.save_path", ns.save_path)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    ns = parse_args(argv)
    config = build_config(ns)

    setup_logging(
        level="DEBUG" if ns.debug else config.get("system.log_level", "INFO"),
        log_dir=config.get("system.log_dir"),
        log_to_file=bool(config.get("system.log_to_file", True)),
    )
    logger.info(f"Starting numguess v{__version__}")

    rng = random.Random(ns.seed) if ns.seed is not None else None
    manager = GameManager.from_config(config, rng=rng)
    adapter = TerminalAdapter(manager)

    if config.get("game.autostart", True) and not ns.no_autostart:
        session = manager.start_new_game()
        adapter.write(MSG_STARTED.format(min=session.min_number, max=session.max_number))
    adapter.write("Type 'help' for a list of commands.")

    if ns.commands is None:
        return adapter.run()

    transcript = adapter.run_script(ns.commands)
    if ns.out:
        try:
            with open(ns.out, "w", encoding="utf-8") as f:
                json.dump({"lines": transcript, "final_state": manager.current_state.name}, f, ensure_ascii=False, indent=2)
        except OSError as e:
            sys.stderr.write(f"Failed to write transcript to {ns.out}: {e}\n")
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
