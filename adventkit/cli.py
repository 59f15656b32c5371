"""Command-line entry point."""

from __future__ import annotations

import argparse
import re
import sys
from typing import List, Optional, Sequence

from adventkit import commands
from adventkit.day import Day, DayFromStrError, parse_day, today

_U8_PATTERN = re.compile(r"\+?[0-9]+")


class _ArgumentError(ValueError):
    """Raised when the command line cannot be parsed."""


class _Arguments:
    """Consumes command-line arguments flag by flag."""

    def __init__(self, args: Sequence[str]) -> None:
        self._args: List[str] = list(args)

    def subcommand(self) -> Optional[str]:
        if not self._args or self._args[0].startswith("-"):
            return None
        return self._args.pop(0)

    def contains(self, flag: str) -> bool:
        if flag in self._args:
            self._args.remove(flag)
            return True
        return False

    def free_day(self) -> Day:
        if not self._args:
            raise _ArgumentError("free-standing argument is missing")
        text = self._args.pop(0)
        try:
            return parse_day(text)
        except DayFromStrError as exc:
            raise _ArgumentError(f"failed to parse '{text}': {exc}") from exc

    def opt_free_day(self) -> Optional[Day]:
        return self.free_day() if self._args else None

    def opt_u8(self, key: str) -> Optional[int]:
        for position, arg in enumerate(self._args):
            if arg == key:
                if position + 1 >= len(self._args):
                    raise _ArgumentError(
                        f"the '{key}' option doesn't have an associated value"
                    )
                text = self._args[position + 1]
                del self._args[position : position + 2]
                return self._parse_u8(text)
            if arg.startswith(key + "="):
                del self._args[position]
                return self._parse_u8(arg[len(key) + 1 :])
        return None

    @staticmethod
    def _parse_u8(text: str) -> int:
        if _U8_PATTERN.fullmatch(text) and int(text) <= 255:
            return int(text)
        raise _ArgumentError(f"failed to parse '{text}': invalid digit found in string")

    def finish(self) -> List[str]:
        remaining, self._args = self._args, []
        return remaining


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line into a namespace with a ``command`` field."""
    args = _Arguments(sys.argv[1:] if argv is None else argv)
    command = args.subcommand()

    if command == "all":
        parsed = argparse.Namespace(command=command, release=args.contains("--release"))
    elif command == "time":
        run_all = args.contains("--all")
        store = args.contains("--store")
        parsed = argparse.Namespace(
            command=command, all=run_all, day=args.opt_free_day(), store=store
        )
    elif command in ("download", "read"):
        parsed = argparse.Namespace(command=command, day=args.free_day())
    elif command == "scaffold":
        parsed = argparse.Namespace(
            command=command,
            day=args.free_day(),
            download=args.contains("--download"),
            overwrite=args.contains("--overwrite"),
        )
    elif command == "solve":
        parsed = argparse.Namespace(
            command=command,
            day=args.free_day(),
            release=args.contains("--release"),
            submit=args.opt_u8("--submit"),
            dhat=args.contains("--dhat"),
        )
    elif command == "today":
        parsed = argparse.Namespace(command=command)
    elif command is not None:
        print(f"Unknown command: {command}", file=sys.stderr)
        raise SystemExit(1)
    else:
        print("No command specified.", file=sys.stderr)
        raise SystemExit(1)

    remaining = args.finish()
    if remaining:
        listed = ", ".join(f'"{arg}"' for arg in remaining)
        print(f"Warning: unknown argument(s): [{listed}].", file=sys.stderr)
    return parsed


def _run_today() -> None:
    day = today()
    if day is None:
        print(
            "`today` command can only be run between the 1st and the 25th of december. "
            "Please use `scaffold` with a specific day.",
            file=sys.stderr,
        )
        raise SystemExit(1)
    commands.handle_scaffold(day, False)
    commands.handle_download(day)
    commands.handle_read(day)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse the command line and dispatch to the matching handler."""
    try:
        args = parse_args(argv)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1)

    if args.command == "all":
        commands.handle_all(args.release)
    elif args.command == "time":
        commands.handle_time(args.day, args.all, args.store)
    elif args.command == "download":
        commands.handle_download(args.day)
    elif args.command == "read":
        commands.handle_read(args.day)
    elif args.command == "scaffold":
        commands.handle_scaffold(args.day, args.overwrite)
        if args.download:
            commands.handle_download(args.day)
    elif args.command == "solve":
        commands.handle_solve(args.day, args.release, args.dhat, args.submit)
    elif args.command == "today":
        _run_today()


if __name__ == "__main__":
    main()