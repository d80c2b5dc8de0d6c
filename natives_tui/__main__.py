"""Allow running as ``python -m natives_tui``."""

from natives_tui.cli.main import main

if __name__ == "__main__":
    main()
