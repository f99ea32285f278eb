"""Entry point for running the command-line sender as a module.

Allows running with: python -m chatbot_notify
"""

import sys

from chatbot_notify.cli import main

if __name__ == "__main__":
    sys.exit(main())
