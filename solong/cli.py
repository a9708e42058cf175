"""Command-line entry point: load and validate a map given as the only argument."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from solong.maps import MapError, load_map
from solong.printf import printf


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the map named on the command line and return an exit status.

    Returns 2 when the number of arguments is wrong, 1 when the map is
    rejected and 0 when it is accepted.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("Error number of arguments \n")
        return 2
    try:
        load_map(args[0])
    except MapError as exc:
        printf("ERROR: %s\n", str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())