#!/usr/bin/env python3
"""Thin entrypoint for tbounds."""

from __future__ import annotations

import sys
from typing import Sequence

from _version import __version__
from models import ValidationError
from orchestrator import Orchestrator


def _print_help() -> None:
    print(
        "tbounds - day/week/month/year boundaries around a timestamp\n\n"
        "Usage:\n"
        "  tbounds                   Boundaries around now\n"
        "  tbounds -h                Show this help\n"
        "  tbounds -v                Show installed version\n"
        "  tbounds -j                Print JSON instead of text\n"
        '  tbounds -z "<zone>"       IANA zone or +HH:MM offset for the reference\n'
        '  tbounds -r "<YYYY-MM-DD[ HH:MM[:SS[.mmm]]]>"\n'
    )


def parse_args(argv: Sequence[str]) -> tuple[dict[str, str], bool, bool]:
    flags: dict[str, str] = {}
    show_version = False
    show_help = False

    idx = 0
    while idx < len(argv):
        arg = argv[idx]
        if arg == "-h":
            show_help = True
            idx += 1
            continue
        if arg == "-v":
            show_version = True
            idx += 1
            continue
        if arg == "-j":
            flags["output"] = "json"
            idx += 1
            continue
        if arg == "-r":
            idx += 1
            if idx >= len(argv):
                raise ValidationError("-r requires a timestamp argument")
            flags["reference"] = argv[idx]
            idx += 1
            continue
        if arg == "-z":
            idx += 1
            if idx >= len(argv):
                raise ValidationError("-z requires a zone argument")
            flags["zone"] = argv[idx]
            idx += 1
            continue
        raise ValidationError(f"Unknown flag '{arg}'")
    return flags, show_version, show_help


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        flag_values, show_version, show_help = parse_args(argv)
    except ValidationError as exc:
        print(str(exc))
        return 1

    if show_version:
        print(__version__)
        return 0

    if show_help:
        _print_help()
        return 0

    try:
        orchestrator = Orchestrator()
        return orchestrator.run(
            flag_values.get("reference"),
            zone=flag_values.get("zone"),
            output=flag_values.get("output"),
        )
    except ValidationError as exc:
        print(str(exc))
        return 1


def cli() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    cli()
