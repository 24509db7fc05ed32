# src/hoststoggle/cli.py
import sys
import argparse
from typing import List, NoReturn, Optional, Sequence

# Module imports
from hoststoggle import __version__
from hoststoggle.config import COMMENTED_HEADER, HOSTS_FILE, UNCOMMENTED_HEADER
from hoststoggle.core.hostsfile import load_lines, save_lines
from hoststoggle.core.toggler import toggle_project
from hoststoggle.errors import HostsToggleError
from hoststoggle.utils.privilege import is_super_user

def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="hosts-toggle",
        description="Comment or uncomment a named block of lines in your hosts file."
    )
    parser.add_argument(
        "-p", "--project",
        type=str,
        default="",
        help="The project name as defined in your hosts-file"
    )
    parser.add_argument(
        "--regex",
        action="store_true",
        help="Treat the project name as a regular expression instead of literal text"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser

def fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)

def display_changes(lines: Sequence[str], header: str) -> None:
    """Prints the header and each line indented. Prints nothing if `lines` is empty."""
    if not lines:
        return
    print(header)
    for line in lines:
        # Bytes that were not valid UTF-8 in the file print as U+FFFD
        printable = line.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
        print(f"\t{printable}")

def main(argv: Optional[List[str]] = None):
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args(argv)

        project = args.project.strip()
        if not project:
            fail("Invalid arguments, use -p to select project")

        if not is_super_user():
            fail("You have to run this program as super-user!")

        # 2. Read
        try:
            lines = load_lines(HOSTS_FILE)
        except OSError as e:
            fail(f"Could not read hosts file '{HOSTS_FILE}': {e}")

        # 3. Toggle (nothing is written if the block can't be found)
        try:
            result = toggle_project(lines, project, literal=not args.regex)
        except HostsToggleError as e:
            fail(str(e))

        # 4. Write
        try:
            save_lines(HOSTS_FILE, result.lines)
        except OSError as e:
            print(f"Error writing hosts file: {e}", file=sys.stderr)
            sys.exit(1)

        # 5. Summary
        print(f"Toggling {project}..")
        if not result.changed:
            print("Nothing to toggle, the block is empty.")
        display_changes(result.uncommented, UNCOMMENTED_HEADER)
        display_changes(result.commented, COMMENTED_HEADER)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
