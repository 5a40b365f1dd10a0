"""Core orchestration — merge, patch, copy.

This service drives the pipeline through the adapters injected at
construction time.  It is responsible for:

* Deriving both framework bundles from the build locations.
* Running the steps strictly in order: merge → patch → copy.
* Ensuring only :class:`~fat_framework.exceptions.FatFrameworkError`
  subclasses escape.

Guarantees
----------
* No direct filesystem access, no subprocess, no console output.
* A failing step stops the pipeline; later steps never run.
"""

from __future__ import annotations

from fat_framework.core.metadata import with_supported_platforms
from fat_framework.core.models import FrameworkBundle, MergeOutcome, MergeRequest
from fat_framework.core.protocols import BinaryMerger, MetadataStore, TreeCopier
from fat_framework.exceptions import FatFrameworkError


class FatFrameworkService:
    """Stateless service that turns two single-platform builds into one.

    Parameters
    ----------
    merger:
        Any object satisfying the :class:`BinaryMerger` protocol.
    metadata_store:
        Any object satisfying the :class:`MetadataStore` protocol.
    copier:
        Any object satisfying the :class:`TreeCopier` protocol.
    """

    def __init__(
        self,
        merger: BinaryMerger,
        metadata_store: MetadataStore,
        copier: TreeCopier,
    ) -> None:
        self._merger: BinaryMerger = merger
        self._metadata_store: MetadataStore = metadata_store
        self._copier: TreeCopier = copier

    def build(self, request: MergeRequest) -> MergeOutcome:
        """Run the pipeline for *request*.

        On success the device bundle holds the fat binary and the patched
        ``Info.plist``, and a copy of it lives in ``request.output_dir``.
        The simulator bundle is left untouched.

        Raises
        ------
        FatFrameworkError
            From whichever step failed first.
        """
        name = request.framework_name
        simulator = FrameworkBundle(name, request.simulator.products_dir)
        device = FrameworkBundle(name, request.device.products_dir)
        output = FrameworkBundle(name, request.output_dir)

        try:
            self._merger.merge_into(
                simulator.binary_path,
                device.binary_path,
                request.device.products_dir / name,
            )

            document = self._metadata_store.load(device.info_plist_path)
            self._metadata_store.save(
                device.info_plist_path,
                with_supported_platforms(document),
            )

            report = self._copier.copy_tree(device.bundle_dir, output.bundle_dir)
        except FatFrameworkError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise FatFrameworkError(
                f"Unexpected error while building {name}.framework: {exc}",
            ) from exc

        return MergeOutcome(bundle=output, copy_report=report)
