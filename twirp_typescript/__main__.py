"""Entry point: python -m twirp_typescript

Runs the protoc plugin over stdin/stdout.
"""

from __future__ import annotations

from .plugin import main

if __name__ == "__main__":
    main()
