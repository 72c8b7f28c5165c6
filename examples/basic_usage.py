#!/usr/bin/env python3
"""
Basic BoldRead Usage Example

This example demonstrates the core workflow:
1. Open a PDF in a reading session
2. Preview a bolded excerpt
3. Tune bolding and typography
4. Generate a different excerpt
5. Export the bolded PDF
"""

import logging
import sys
from pathlib import Path

from boldread import (
    BoldingConfig,
    BoldReadError,
    DocumentSession,
    EmptyDocumentError,
    LayoutConfig,
    SessionConfig,
)


def main(path: str) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # ─────────────────────────────────────────────────────────────────────────
    # 1. Open a session (seeded so the excerpt is reproducible)
    # ─────────────────────────────────────────────────────────────────────────

    try:
        session = DocumentSession.from_path(path, SessionConfig(seed=42))
    except BoldReadError as e:
        print(f"Could not read {path}: {e}")
        return 1

    if session.is_empty:
        print("Nothing to show: no paragraphs found.")
        return 0

    print(f"Paragraphs: {len(session.paragraphs)}")
    print(f"Language: {session.raw.language or 'unknown'}")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Preview
    # ─────────────────────────────────────────────────────────────────────────

    print(session.preview().to_markdown())

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Tune settings
    # ─────────────────────────────────────────────────────────────────────────

    session.update_settings(
        bolding=BoldingConfig.from_strength(2),
        layout=LayoutConfig(font_size=14, line_spacing=1.8),
    )

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Generate new text
    # ─────────────────────────────────────────────────────────────────────────

    try:
        session.regenerate()
    except EmptyDocumentError:
        return 0
    print(session.preview(mode="full").to_markdown())

    # ─────────────────────────────────────────────────────────────────────────
    # 5. Export
    # ─────────────────────────────────────────────────────────────────────────

    output = Path(path).with_name(Path(path).stem + "-bold.pdf")
    result = session.export(download=output.write_bytes)
    print(f"Wrote {output} ({result.page_count} pages)")
    for entry in result.processing_log:
        print(f"  {entry}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else "document.pdf"))
