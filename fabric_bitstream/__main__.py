"""Package entry point for ``python -m fabric_bitstream``.

WHY: Users run the writer as ``python -m fabric_bitstream bits.json -o
fabric_bitstream.txt``. Python's ``-m`` flag looks for ``__main__.py``
inside the package and executes it.

HOW: Delegates to the CLI's main() and exits with its status.
"""

import sys

if __name__ == "__main__":
    from fabric_bitstream.cli import main
    sys.exit(main())
