#!/usr/bin/env python
"""Run one resize against the configured object store and save the JPEG."""
from __future__ import annotations

import argparse
import base64
import sys
from pathlib import Path

from resizer.services.orchestrator import handle_request
from resizer.utils.log_setup import configure_logging


def main() -> int:
    parser = argparse.ArgumentParser(description="Resize a stored image locally")
    parser.add_argument("path", help="Request path, e.g. /images.story.io/cat.png")
    parser.add_argument("--width", type=int, default=0)
    parser.add_argument("--height", type=int, default=0)
    parser.add_argument("--output", type=Path, default=Path("resized.jpg"))
    args = parser.parse_args()

    configure_logging()
    query = {"width": str(args.width), "height": str(args.height)}
    envelope = handle_request(args.path, query)
    print(f"{envelope.status_code} {envelope.headers}")
    if not envelope.is_base64_encoded:
        print(envelope.body)
        return 1

    args.output.write_bytes(base64.b64decode(envelope.body))
    print(f"Wrote {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
