"""Native concatenation adapters implementing ConcatPort."""

from __future__ import annotations

import errno
import os
import tempfile
from typing import TYPE_CHECKING

from daycatalog.core.models import ConcatSupport


if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


# errno values meaning "this filesystem can't do it", as opposed to a real failure
_UNSUPPORTED_ERRNOS = frozenset(
    {errno.ENOSYS, errno.EXDEV, errno.EOPNOTSUPP, errno.EINVAL, errno.EBADF}
)

_PROBE_BYTES = b"probe"


class UnsupportedConcat:
    """ConcatPort for filesystems without native concatenation.

    Always reports ConcatSupport.UNSUPPORTED, so the assembler streams.
    """

    def probe(self, directory: Path) -> ConcatSupport:  # noqa: ARG002
        """Report no native support."""
        return ConcatSupport.UNSUPPORTED

    def concat(self, dest: Path, inputs: Sequence[Path]) -> None:  # noqa: ARG002
        """Never called for this adapter."""
        raise NotImplementedError("Native concatenation is not supported")


class CopyFileRangeConcat:
    """ConcatPort backed by the kernel's ``copy_file_range``.

    Bytes are moved inside the kernel (or by the filesystem itself, e.g.
    reflinks or server-side copy), without a user-space buffer. Support is
    probed by a tiny trial copy in the target directory, since availability
    depends on the platform, the kernel and the filesystem.
    """

    def probe(self, directory: Path) -> ConcatSupport:
        """Try a small copy between two scratch files in ``directory``."""
        if not hasattr(os, "copy_file_range"):
            return ConcatSupport.UNSUPPORTED
        try:
            with (
                tempfile.TemporaryFile(dir=directory) as src,
                tempfile.TemporaryFile(dir=directory) as dst,
            ):
                src.write(_PROBE_BYTES)
                src.flush()
                src.seek(0)
                copied = os.copy_file_range(src.fileno(), dst.fileno(), len(_PROBE_BYTES))
        except OSError as e:
            if e.errno in _UNSUPPORTED_ERRNOS:
                return ConcatSupport.UNSUPPORTED
            raise
        if copied != len(_PROBE_BYTES):
            return ConcatSupport.UNSUPPORTED
        return ConcatSupport.SUPPORTED

    def concat(self, dest: Path, inputs: Sequence[Path]) -> None:
        """Append each input to ``dest`` in order.

        Raises:
            OSError: If an input cannot be read or dest cannot be written.
        """
        with dest.open("wb") as out:
            out_fd = out.fileno()
            for path in inputs:
                with path.open("rb") as src:
                    in_fd = src.fileno()
                    remaining = os.fstat(in_fd).st_size
                    while remaining > 0:
                        copied = os.copy_file_range(in_fd, out_fd, remaining)
                        if copied == 0:
                            # Some kernels report unsupported files this way
                            raise OSError(errno.EIO, f"Short copy from {path}")
                        remaining -= copied
