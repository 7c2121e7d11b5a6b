"""Module entry point so ``python -m emoji_sad`` runs the CLI."""

import sys

from emoji_sad.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
