"""
StatCoach CLI Entry Point

Allows running the package as a module: python -m statcoach
"""

from statcoach.cli import main

if __name__ == "__main__":
    main()
