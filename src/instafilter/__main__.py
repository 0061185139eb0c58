"""Allow ``python -m instafilter`` to launch the editor."""

from .gui.main import main

if __name__ == "__main__":
    raise SystemExit(main())
