"""Ordered assembly of cached day files into one catalog file."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from daycatalog.core.exceptions import AssemblyFailed
from daycatalog.core.models import ConcatSupport


if TYPE_CHECKING:
    from collections.abc import Sequence

    from daycatalog.core.ports import ConcatPort


logger = logging.getLogger(__name__)

# Copy buffer for the streaming fallback (32KB)
_BUFFER_SIZE = 1 << 15


class CatalogAssembler:
    """Concatenates input files, in order, into a single published file.

    Uses the injected ConcatPort when its probe reports native support for
    the output directory, and a buffered byte copy otherwise. Both paths
    produce identical bytes. Output is built under a temporary name and
    renamed into place only on full success.

    Attributes:
        buffer_size: Chunk size used by the streaming fallback.
    """

    def __init__(
        self,
        concat: ConcatPort | None = None,
        buffer_size: int = _BUFFER_SIZE,
    ) -> None:
        """Initialize the assembler.

        Args:
            concat: Native concatenation adapter. If None, always streams.
            buffer_size: Chunk size for the streaming fallback.
        """
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._concat = concat
        self.buffer_size = buffer_size

    def support_for(self, directory: Path) -> ConcatSupport:
        """Return the concatenation strategy that applies to ``directory``."""
        if self._concat is None:
            return ConcatSupport.UNSUPPORTED
        return self._concat.probe(directory)

    def assemble(self, inputs: Sequence[Path], dest: Path) -> Path:
        """Concatenate ``inputs`` into ``dest``.

        Args:
            inputs: Files to concatenate, in output order.
            dest: Final path of the assembled file. Replaced if it exists.

        Returns:
            The published path (``dest``).

        Raises:
            ValueError: If ``inputs`` is empty.
            AssemblyFailed: If any input cannot be read or the output cannot
                be written. Nothing is published at ``dest`` in that case.
        """
        if not inputs:
            raise ValueError("No input files to assemble")

        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                delete=False, dir=dest.parent, prefix=f".{dest.name}.", suffix=".part"
            ) as tmp_file:
                tmp_path = Path(tmp_file.name)
        except OSError as e:
            raise AssemblyFailed(dest, e) from e

        try:
            support = self.support_for(dest.parent)
            if support is ConcatSupport.SUPPORTED:
                assert self._concat is not None  # SUPPORTED implies an adapter
                logger.debug("Native concat of %d file(s) into %s", len(inputs), dest)
                self._concat.concat(tmp_path, inputs)
            else:
                logger.debug("Streaming %d file(s) into %s", len(inputs), dest)
                self._copy(tmp_path, inputs)
            os.replace(tmp_path, dest)
        except OSError as e:
            logger.error("Assembly of %s failed: %s", dest, e)
            raise AssemblyFailed(dest, e) from e
        finally:
            tmp_path.unlink(missing_ok=True)

        logger.info("Assembled %d file(s) into %s", len(inputs), dest)
        return dest

    def _copy(self, dest: Path, inputs: Sequence[Path]) -> None:
        """Stream each input into ``dest`` with a fixed-size buffer."""
        with dest.open("wb") as out:
            for path in inputs:
                with path.open("rb") as src:
                    for chunk in iter(lambda: src.read(self.buffer_size), b""):  # noqa: B023
                        out.write(chunk)
