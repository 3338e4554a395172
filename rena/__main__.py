"""
rena - Main Entry

Supports:
- CLI mode (default)
- GUI mode (--gui parameter)

Usage:
    python -m rena ./images                  # CLI mode
    python -m rena ./images --dry-run        # CLI preview
    python -m rena --gui                     # GUI mode
"""

import sys


def main():
    """Main entry point"""
    if "--gui" in sys.argv[1:]:
        try:
            from .gui import main as gui_main
        except ImportError as e:
            print("Error: Unable to start GUI, please ensure PySide6 is installed", file=sys.stderr)
            print(f"Detailed error: {e}", file=sys.stderr)
            print("\nInstall command: pip install PySide6", file=sys.stderr)
            return 1
        return gui_main()

    from .cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
