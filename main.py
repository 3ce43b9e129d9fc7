"""Electromagnetic Spectrum Explorer — Entry Point."""
import sys

from spectrum_explorer.application import main


if __name__ == "__main__":
    sys.exit(main())
