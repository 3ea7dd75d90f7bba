"""
Main Entry Point for linsgd
===========================

Entry point when linsgd is called as a module:
    python -m linsgd [command] [args...]
"""

from linsgd.cli.main import main

if __name__ == "__main__":
    main()
