#!/usr/bin/env python3
"""
Style Rename Tool - Main Entry

Supports:
- GUI mode (default startup)
- CLI mode (--cli or -c parameter)

Usage:
    python main.py                          # GUI mode (default)
    python main.py --cli ./docs kebab       # CLI command mode
    python main.py -c ./docs snake --dry    # CLI preview
    python main.py -c --interactive         # CLI interactive mode
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    # Check if CLI should be started
    if "--cli" in sys.argv or "-c" in sys.argv:
        args = [arg for arg in sys.argv[1:] if arg not in ("--cli", "-c")]

        # CLI mode
        from cli import main as cli_main
        return cli_main(args)

    # Default to starting GUI
    try:
        from gui import main as gui_main
        return gui_main()
    except ImportError as e:
        print(f"Error: GUI needs PySide6 ({e})", file=sys.stderr)
        print("Install it with: pip install PySide6", file=sys.stderr)
        print("Without the GUI, run: python main.py --cli <root> <style> [--dry]", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
