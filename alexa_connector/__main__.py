"""Package entry point for ``python -m alexa_connector``.

WHY: Operators run the connector as ``python -m alexa_connector discovery.json``
to preview or export the Alexa endpoints for a discovery file.

HOW: Delegates to the CLI's main() and exits with its status code.
"""

import sys

from alexa_connector.cli import main

if __name__ == "__main__":
    sys.exit(main())
