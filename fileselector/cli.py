"""Terminal front end for the file selector.

Prints the listing of the current directory every frame and reads one
command: an entry number to activate it, `c` to choose, `q` to close.
"""
from __future__ import annotations

import argparse
import sys

from .config import load_labels, setup_logging
from .exceptions import ConfigError, IndexOutOfRange, PathResolutionError
from .fs import path_module
from .navigator import FileSelector, Purpose


def render(selector: FileSelector, out=None) -> None:
    out = out or sys.stdout
    print(f"== {selector.label()} ==", file=out)
    print(selector.current_directory, file=out)
    for i, name in enumerate(selector.listing):
        print(f"  [{i}] {name}", file=out)
    if selector.selection:
        print(f"Selected: {selector.selection}", file=out)
    print(f"(number) activate, c) {selector.choose_text()}, q) {selector.close_text()}", file=out)


def run_loop(selector: FileSelector, read=None, out=None) -> int:
    read = read or input
    out = out or sys.stdout
    result = {}
    join = path_module(selector.fs_reader).join
    selector.on_choose_pressed = lambda directory, file: result.update(path=join(directory, file))
    selector.on_close_pressed = lambda: result.update(closed=True)

    while not selector.closed:
        render(selector, out)
        try:
            command = read("> ").strip()
        except EOFError:
            selector.close()
            break

        if command == "c":
            selector.choose()
        elif command == "q":
            selector.close()
        elif command.isdigit():
            try:
                selector.activate_index(int(command))
            except IndexOutOfRange as e:
                print(f"No such entry: {e}", file=out)
            except PathResolutionError as e:
                print(f"Cannot open directory: {e}", file=out)
        else:
            print(f"Unknown command: {command!r}", file=out)

    if "path" in result:
        print(result["path"], file=out)
        return 0
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='fileselector', description='Browse for a file in the terminal')
    parser.add_argument('path', nargs='?', default='.', help='Directory to start in (default: current directory)')
    parser.add_argument('--save', action='store_true', help='Label the dialog for saving instead of opening')
    parser.add_argument('--labels', help='JSON settings file with button labels')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    try:
        labels = load_labels(args.labels) if args.labels else None
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    purpose = Purpose.SAVE if args.save else Purpose.OPEN
    try:
        selector = FileSelector(args.path, purpose, labels=labels)
    except PathResolutionError as e:
        print(f"Error: {e}")
        return 1

    try:
        return run_loop(selector)
    except KeyboardInterrupt:
        print('\nCancelled')
        return 1


if __name__ == '__main__':
    raise SystemExit(main())
