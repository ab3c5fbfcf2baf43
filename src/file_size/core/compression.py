"""Gzip sizing of byte buffers and byte streams.

The gzip container is produced by zlib itself (``wbits = 16 + window_bits``),
which writes a fixed header with a zero timestamp. Output is therefore
byte-for-byte deterministic for identical input and options.
"""

from __future__ import annotations

import asyncio
import logging
import zlib
from collections.abc import Callable
from types import TracebackType
from typing import BinaryIO, Final, Self

from file_size.config import GzipOptions
from file_size.exceptions import CompressionError

logger = logging.getLogger(__name__)

# Offset added to window_bits to make zlib emit a gzip header and trailer
GZIP_WBITS_OFFSET: Final[int] = 16

DEFAULT_CHUNK_SIZE: Final[int] = 64 * 1024

_DEFAULT_OPTIONS: Final[GzipOptions] = GzipOptions()


def _compressor(options: GzipOptions) -> zlib._Compress:  # pyright: ignore[reportPrivateUsage]
    try:
        return zlib.compressobj(
            options.level,
            zlib.DEFLATED,
            GZIP_WBITS_OFFSET + options.window_bits,
            options.mem_level,
            options.strategy,
        )
    except (ValueError, zlib.error, OverflowError) as exc:
        msg = f"Compressor rejected options {options.model_dump()}: {exc}"
        raise CompressionError(msg, {"options": options.model_dump()}) from exc


def _as_bytes(buffer: object) -> memoryview:
    try:
        return memoryview(buffer)  # pyright: ignore[reportArgumentType]
    except TypeError as exc:
        msg = f"Expected a bytes-like object, got {type(buffer).__name__}"
        raise CompressionError(msg) from exc


def gzip_compress(buffer: bytes | bytearray | memoryview, options: GzipOptions | None = None) -> bytes:
    """Compress a buffer into a gzip byte stream.

    Args:
        buffer: Bytes-like object to compress (may be empty)
        options: Compressor options, zlib defaults when omitted

    Returns:
        The complete gzip stream

    Raises:
        CompressionError: If zlib rejects the options or the input is not bytes-like
    """
    options = options or _DEFAULT_OPTIONS
    data = _as_bytes(buffer)
    compressor = _compressor(options)
    try:
        compressed = compressor.compress(data) + compressor.flush(zlib.Z_FINISH)
    except zlib.error as exc:
        raise CompressionError(f"Compression failed: {exc}") from exc

    logger.debug(
        "Compressed buffer",
        extra={"raw_size": data.nbytes, "compressed_size": len(compressed), "level": options.level},
    )
    return compressed


async def gzip_compress_async(
    buffer: bytes | bytearray | memoryview,
    options: GzipOptions | None = None,
) -> bytes:
    """Compress a buffer in a worker thread.

    Same result as :func:`gzip_compress`; zlib releases the GIL while
    compressing, so concurrent calls overlap.
    """
    return await asyncio.to_thread(gzip_compress, buffer, options)


GzipSizeCallback = Callable[[int], object]


class GzipSizeStream:
    """Writable sink that measures the gzip size of everything written to it.

    Chunks are compressed incrementally and discarded, so arbitrarily large
    inputs can be measured without buffering them. Listeners registered
    with :meth:`on_gzip_size` fire once, on :meth:`close`, with the final
    compressed length.

    Example:
        >>> with GzipSizeStream() as stream:
        ...     _ = stream.write(b"abc" * 1000)
        >>> stream.gzip_size > 0
        True
    """

    def __init__(self, options: GzipOptions | None = None) -> None:
        """Initialize the stream.

        Args:
            options: Compressor options, zlib defaults when omitted

        Raises:
            CompressionError: If zlib rejects the options
        """
        self.options: GzipOptions = options or _DEFAULT_OPTIONS
        self.raw_size: int = 0
        self.gzip_size: int = 0
        self.closed: bool = False
        self._pending_size: int = 0
        self._listeners: list[GzipSizeCallback] = []
        self._compressor: zlib._Compress = _compressor(self.options)  # pyright: ignore[reportPrivateUsage]

    def on_gzip_size(self, callback: GzipSizeCallback) -> None:
        """Register a callback receiving the final compressed length."""
        self._listeners.append(callback)

    def writable(self) -> bool:
        return not self.closed

    def write(self, chunk: bytes | bytearray | memoryview) -> int:
        """Feed a chunk to the compressor.

        Returns:
            Number of raw bytes consumed

        Raises:
            ValueError: If the stream is already closed
            CompressionError: If the chunk is not bytes-like or compression fails
        """
        if self.closed:
            raise ValueError("write to closed GzipSizeStream")
        data = _as_bytes(chunk)
        try:
            self._pending_size += len(self._compressor.compress(data))
        except zlib.error as exc:
            self.gzip_size = 0
            raise CompressionError(f"Compression failed: {exc}") from exc
        self.raw_size += data.nbytes
        return data.nbytes

    def close(self) -> None:
        """Flush the compressor and notify listeners; closing twice is a no-op."""
        if self.closed:
            return
        self.closed = True
        try:
            self._pending_size += len(self._compressor.flush(zlib.Z_FINISH))
        except zlib.error as exc:
            self.gzip_size = 0
            raise CompressionError(f"Compression failed: {exc}") from exc

        self.gzip_size = self._pending_size
        logger.debug(
            "Gzip stream finished",
            extra={"raw_size": self.raw_size, "compressed_size": self.gzip_size},
        )
        for callback in self._listeners:
            _ = callback(self.gzip_size)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.close()
        else:
            # Abandon the stream without notifying listeners
            self.closed = True
            self.gzip_size = 0


def gzip_size_from_stream(
    readable: BinaryIO,
    options: GzipOptions | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Measure the gzip size of a binary stream until EOF.

    Args:
        readable: Binary file object to consume
        options: Compressor options, zlib defaults when omitted
        chunk_size: Number of bytes read per iteration

    Returns:
        Compressed length of the whole stream
    """
    with GzipSizeStream(options) as stream:
        while chunk := readable.read(chunk_size):
            _ = stream.write(chunk)
    return stream.gzip_size
