"""Entry point for running claimboard as a module.

Usage:
    python -m claimboard
"""

from claimboard.app import main

if __name__ == "__main__":
    main()
