"""Pure ``Info.plist`` transformations."""

from __future__ import annotations

from fat_framework.core.models import PlistDocument

SUPPORTED_PLATFORMS_KEY: str = "CFBundleSupportedPlatforms"

FAT_SUPPORTED_PLATFORMS: tuple[str, ...] = ("iPhoneOS", "iPhoneSimulator")
"""Platforms declared by a bundle whose binary covers device and simulator."""


def with_supported_platforms(
    document: PlistDocument,
    platforms: tuple[str, ...] = FAT_SUPPORTED_PLATFORMS,
) -> PlistDocument:
    """Return a copy of *document* declaring *platforms*.

    Any existing ``CFBundleSupportedPlatforms`` value is overwritten.  The
    key keeps its position when present; every other key and the encoding
    are carried over unchanged.
    """
    data = dict(document.data)
    data[SUPPORTED_PLATFORMS_KEY] = list(platforms)
    return PlistDocument(data=data, encoding=document.encoding)
