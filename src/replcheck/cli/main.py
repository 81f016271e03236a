# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the replcheck command-line interface."""

import argparse
import sys
from pathlib import Path

from yachalk import chalk

from replcheck.session.splitter import split_to_transcript
from replcheck.session.transcript import Transcript, TranscriptError, UnitRecord, save_transcript
from replcheck.settings.config import ConfigError, ReplConfig, find_config, load_config
from replcheck.validator.input_validator import InputValidator, ValidationResult

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the replcheck CLI."""
    parser = argparse.ArgumentParser(
        prog="replcheck",
        description="replcheck - line-by-line completeness checks for REPL input",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Configuration file (default: .replcheck.yaml in the current directory, if present)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # split subcommand
    split_parser = subparsers.add_parser(
        "split",
        help="Split a file into the units a REPL would dispatch",
        description="Feed a file line by line to the validator and print every unit.",
    )
    split_parser.add_argument("file", help="Input file to split")
    split_parser.add_argument(
        "--transcript",
        metavar="OUT",
        help="Also write the units to a YAML transcript file",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Report unbalanced or unterminated input in a file",
        description="Report units that end in a mismatch or are left incomplete.",
    )
    check_parser.add_argument("file", help="Input file to check")

    # repl subcommand
    subparsers.add_parser(
        "repl",
        help="Read input interactively with continuation prompts",
        description="Read lines from standard input and echo every complete unit. Enter '.q' to quit.",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_QUIT_COMMAND = ".q"

_STATUS_STYLES = {
    "complete": chalk.green,
    "incomplete": chalk.yellow,
    "mismatch": chalk.red,
}

_PROBLEMS = {
    "incomplete": "input ends inside an open bracket, comment or literal",
    "mismatch": "closing delimiter does not match the innermost open one",
}


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "split":
        return _cmd_split(args, config)
    if args.command == "check":
        return _cmd_check(args, config)
    if args.command == "repl":
        return _cmd_repl(config)
    return 0


def _resolve_config(args: argparse.Namespace) -> ReplConfig:
    """Load the explicit config file, else the one in the working directory, else defaults."""
    if args.config is not None:
        return load_config(Path(args.config))
    discovered = find_config(Path.cwd())
    if discovered is None:
        return ReplConfig()
    return load_config(discovered)


def _split_file(path: Path, config: ReplConfig) -> Transcript | None:
    """Split *path* into units, printing an error and returning None if it cannot be read."""
    if not path.is_file():
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return None
    validator = InputValidator(config.validator)
    try:
        # Only line terminators split lines; form feeds and other separators stay in the text.
        with path.open(encoding="utf-8", newline="") as fh:
            return split_to_transcript(fh, source=str(path), validator=validator)
    except OSError as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return None


def _describe_lines(unit: UnitRecord) -> str:
    if unit.first_line == unit.last_line:
        return f"line {unit.first_line}"
    return f"lines {unit.first_line}-{unit.last_line}"


def _cmd_split(args: argparse.Namespace, config: ReplConfig) -> int:
    """Handle the split subcommand."""
    transcript = _split_file(Path(args.file), config)
    if transcript is None:
        return 1

    for unit in transcript.units:
        status = _STATUS_STYLES[unit.status](unit.status)
        print(f"[{unit.index + 1}] {status} ({_describe_lines(unit)})")
        print(unit.text)

    if args.transcript is not None:
        try:
            save_transcript(transcript, Path(args.transcript))
        except TranscriptError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(f"Transcript written: {args.transcript}")

    return 1 if transcript.has_errors else 0


def _cmd_check(args: argparse.Namespace, config: ReplConfig) -> int:
    """Handle the check subcommand."""
    transcript = _split_file(Path(args.file), config)
    if transcript is None:
        return 1

    print(f"Checking {len(transcript.units)} unit(s)...")
    for unit in transcript.units:
        if unit.is_error:
            print(f"Error: {_describe_lines(unit)}: {_PROBLEMS[unit.status]}", file=sys.stderr)

    if transcript.has_errors:
        return 1

    print(chalk.green("No issues found."))
    return 0


def _cmd_repl(config: ReplConfig) -> int:
    """Handle the repl subcommand."""
    validator = InputValidator(config.validator)
    _write_prompt(validator, config)

    for raw in sys.stdin:
        line = raw.rstrip("\r\n")
        if not validator.input and line.strip() == _QUIT_COMMAND:
            return 0

        result = validator.validate(line)
        if result is ValidationResult.COMPLETE:
            text = validator.take_input()
            if text.strip():
                print(text)
        elif result is ValidationResult.MISMATCH:
            validator.reset()
            print(f"Error: {_PROBLEMS['mismatch']}", file=sys.stderr)
        _write_prompt(validator, config)

    if validator.input:
        print()
        print(f"Warning: discarding incomplete input: {validator.take_input()!r}")
    return 0


def _write_prompt(validator: InputValidator, config: ReplConfig) -> None:
    if validator.input or validator.expected_indent:
        indent = " " * (validator.expected_indent * config.indent_width)
        prompt = config.continuation_prompt + indent
    else:
        prompt = config.prompt
    sys.stdout.write(prompt)
    sys.stdout.flush()
