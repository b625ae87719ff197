from __future__ import annotations

from texttoslide.cli import main

if __name__ == "__main__":
    main()
