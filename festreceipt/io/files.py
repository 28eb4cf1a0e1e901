"""Module for writing files."""

from pathlib import Path


def write_pdf(path: str | Path, pdf_bytes: bytes | bytearray) -> Path:
    """Write PDF bytes to a file, creating its directory if needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.write(pdf_bytes)
    return path
