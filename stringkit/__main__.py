"""Package entry point for ``python -m stringkit``.

WHY: Python's ``-m`` flag looks for ``__main__.py`` inside the package.

HOW: Delegates to cli.main() and exits with its return code.
"""

import sys

from stringkit.cli import main

if __name__ == "__main__":
    sys.exit(main())
