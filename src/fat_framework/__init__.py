"""fat-framework — merge simulator and device Xcode framework builds.

Combines the two single-architecture static-library binaries with
``lipo``, declares both platforms in ``Info.plist`` and copies the
resulting bundle to an output folder.
"""

from fat_framework.version import __version__

__all__: list[str] = ["__version__"]
