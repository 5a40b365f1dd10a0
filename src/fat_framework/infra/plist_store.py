"""Infrastructure: ``Info.plist`` reading and writing via :mod:`plistlib`.

The encoding (XML or binary) is detected from the ``bplist00`` magic
header on load and reused on save, and keys are written in their
original order.  Every I/O or format failure surfaces as
:class:`~fat_framework.exceptions.MetadataError`.
"""

from __future__ import annotations

import logging
import plistlib
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from fat_framework.core.models import PlistDocument, PlistEncoding
from fat_framework.exceptions import MetadataError

_LOGGER: logging.Logger = logging.getLogger(__name__)

_BINARY_MAGIC: bytes = b"bplist00"

_FORMATS: dict[PlistEncoding, plistlib.PlistFormat] = {
    PlistEncoding.XML: plistlib.FMT_XML,
    PlistEncoding.BINARY: plistlib.FMT_BINARY,
}


def detect_encoding(raw: bytes) -> PlistEncoding:
    if raw[: len(_BINARY_MAGIC)] == _BINARY_MAGIC:
        return PlistEncoding.BINARY
    return PlistEncoding.XML


def loads_plist(raw: bytes) -> PlistDocument:
    """Parse *raw* into a :class:`PlistDocument`.

    Raises
    ------
    MetadataError
        When *raw* is not a property list with a dictionary at the top.
    """
    encoding = detect_encoding(raw)
    try:
        data: Any = plistlib.loads(raw, fmt=_FORMATS[encoding])
    except (plistlib.InvalidFileException, ExpatError, ValueError, AttributeError) as exc:
        # AttributeError comes from an unparsable <date> value.
        raise MetadataError(f"Failed to unmarshal plist file: {exc}") from exc

    if not isinstance(data, dict):
        raise MetadataError(
            f"Failed to unmarshal plist file: expected a dictionary, "
            f"got {type(data).__name__}",
        )
    return PlistDocument(data=data, encoding=encoding)


def dumps_plist(document: PlistDocument) -> bytes:
    """Serialize *document* with its recorded encoding, preserving key order."""
    try:
        return plistlib.dumps(
            document.data,
            fmt=_FORMATS[document.encoding],
            sort_keys=False,
        )
    except (TypeError, ValueError, OverflowError) as exc:
        raise MetadataError(f"Failed to marshal plist file: {exc}") from exc


def load_plist(path: Path) -> PlistDocument:
    """Read and parse the plist at *path*."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise MetadataError(f"Failed to read info plist file {path}: {exc}") from exc

    document = loads_plist(raw)
    _LOGGER.debug("Loaded %s (%s, %d keys)", path, document.encoding.value, len(document.data))
    return document


def save_plist(path: Path, document: PlistDocument) -> None:
    """Overwrite *path* with *document*."""
    raw = dumps_plist(document)
    try:
        path.write_bytes(raw)
    except OSError as exc:
        raise MetadataError(f"Failed to write plist file {path}: {exc}") from exc
    _LOGGER.debug("Wrote %s (%s)", path, document.encoding.value)


class PlistStore:
    """Concrete :class:`~fat_framework.core.protocols.MetadataStore`."""

    def load(self, path: Path) -> PlistDocument:
        return load_plist(path)

    def save(self, path: Path, document: PlistDocument) -> None:
        save_plist(path, document)
