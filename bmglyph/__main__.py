"""A very tiny CLI.

Invoke using e.g. ``python -m bmglyph version`` or
``python -m bmglyph show font.fnt 65 66``.
"""

import sys
import argparse

import bmglyph


def show(path, codepoints):
    try:
        table = bmglyph.build(path)
    except (bmglyph.FontFileIOError, bmglyph.FontFormatError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    with table:
        print(f"{table.source}: {len(table)} glyphs")
        for codepoint, lineno in table.duplicates:
            print(f"  duplicate glyph {codepoint} on line {lineno} ignored")
        for codepoint in codepoints or table.codepoints:
            metrics = table.lookup(codepoint)
            if metrics is None:
                print(f"  {codepoint:>6}  not found")
            else:
                print(
                    f"  {codepoint:>6}  position={metrics.position} "
                    f"size={metrics.size} offset={metrics.offset}"
                )
    return 0


def main(argv=None):
    # Get argv so we can massage it
    if argv is None:
        argv = sys.argv[1:]
    elif argv and argv[0].endswith(".py"):
        argv = argv[1:]

    # Defaults and aliases
    if not argv:
        argv = ["help"]
    if argv == ["--version"]:
        argv = ["version"]

    parser = argparse.ArgumentParser(
        prog="bmglyph",
        description="The (very basic) bmglyph CLI",
    )
    parser.add_argument(
        "command",
        action="store",
        help="The command to run: 'help', 'version' or 'show'",
    )
    parser.add_argument("path", nargs="?", help="The .fnt file for 'show'")
    parser.add_argument(
        "codepoints", nargs="*", type=int, help="Codepoints to show (default all)"
    )

    args = parser.parse_args(argv)
    command = args.command.lower()

    if command == "help":
        parser.print_help()
    elif command == "version":
        print("bmglyph v" + bmglyph.__version__)
    elif command == "show":
        if not args.path:
            print("The 'show' command needs a path to a .fnt file", file=sys.stderr)
            return 2
        return show(args.path, args.codepoints)
    else:
        print(f"Invalid command '{command}'", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
