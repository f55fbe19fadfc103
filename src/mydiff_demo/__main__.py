"""
Main entry point for the demo package.

Allows invoking the demo via:
    python -m mydiff_demo run               # Full walkthrough
    python -m mydiff_demo run employees     # Employees table walkthrough
"""

from mydiff_demo.cli.main import main

if __name__ == "__main__":
    main()
