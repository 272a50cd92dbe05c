import math
import struct

from .constants import (
    OFF_UNCOMPRESSED_SIZE, OFF_TOTAL_PAYLOAD_SIZE, OFF_HEAD_PAYLOAD_SIZE,
    OFF_FIRST_FILE_ENCODE, OFF_UNK10, OFF_UNCOMPRESSED_SIZE2,
    OFF_TOTAL_PAYLOAD_SIZE2, OFF_BLOCK_COUNT, OFF_GRANULARITY, OFF_UNK28,
    OFF_BLOCK_SIZES, BLOCK_SIZE_ENTRY,
)

# Header layout, observed on Bundles2 files:
#   0  u32 uncompressed size      4  u32 total payload size
#   8  u32 head payload size     12  u32 first file encode
#  16  u32 ?                     20  u64 uncompressed size (again)
#  28  u64 total payload (again) 36  u32 block count (stored)
#  40  u32 block granularity     44  u32[4] ?
#  60  u32[n] compressed size of each block


def _u32(buf, offset):
    return struct.unpack_from('<I', buf, offset)[0]


def _u64(buf, offset):
    return struct.unpack_from('<Q', buf, offset)[0]


def compute_block_count(uncompressed_size, granularity):
    # true division, then round up; granularity 0 raises ZeroDivisionError
    return math.ceil(uncompressed_size / granularity)


def block_table_end(block_count):
    """Offset right after block_sizes[], where the compressed data starts."""
    return OFF_BLOCK_SIZES + BLOCK_SIZE_ENTRY * block_count


def read_header(buffer):
    """
    Read the fields needed to address the first compressed block.

    Returns:
      (uncompressed_size, total_payload_size, head_payload_size, granularity,
       block_count, first_block_size, block_array_offset)

    Nothing is validated. A short buffer raises struct.error and a zero
    granularity raises ZeroDivisionError.
    """
    size = _u32(buffer, OFF_UNCOMPRESSED_SIZE)
    total_payload_size = _u32(buffer, OFF_TOTAL_PAYLOAD_SIZE)
    head_payload_size = _u32(buffer, OFF_HEAD_PAYLOAD_SIZE)
    granularity = _u32(buffer, OFF_GRANULARITY)
    count = compute_block_count(size, granularity)
    first = _u32(buffer, OFF_BLOCK_SIZES)
    return (size, total_payload_size, head_payload_size, granularity,
            count, first, block_table_end(count))


def parse_bundle_header(buffer):
    """Every named header field, plus the recomputed block count."""
    size = _u32(buffer, OFF_UNCOMPRESSED_SIZE)
    granularity = _u32(buffer, OFF_GRANULARITY)
    count = compute_block_count(size, granularity)
    return {
        "uncompressed_size": size,
        "total_payload_size": _u32(buffer, OFF_TOTAL_PAYLOAD_SIZE),
        "head_payload_size": _u32(buffer, OFF_HEAD_PAYLOAD_SIZE),
        "first_file_encode": _u32(buffer, OFF_FIRST_FILE_ENCODE),
        "unk10": _u32(buffer, OFF_UNK10),
        "uncompressed_size2": _u64(buffer, OFF_UNCOMPRESSED_SIZE2),
        "total_payload_size2": _u64(buffer, OFF_TOTAL_PAYLOAD_SIZE2),
        "declared_block_count": _u32(buffer, OFF_BLOCK_COUNT),
        "granularity": granularity,
        "unk28": struct.unpack_from('<4I', buffer, OFF_UNK28),
        "block_count": count,
        "block_array_offset": block_table_end(count),
    }


def read_block_sizes(buffer, block_count):
    return struct.unpack_from(f'<{block_count}I', buffer, OFF_BLOCK_SIZES)


def find_anomalies(header):
    notes = []
    if header["declared_block_count"] != header["block_count"]:
        notes.append(
            f"declared block count {header['declared_block_count']} "
            f"!= computed {header['block_count']}"
        )
    if header["uncompressed_size2"] != header["uncompressed_size"]:
        notes.append(
            f"uncompressed_size2 {header['uncompressed_size2']} "
            f"!= uncompressed_size {header['uncompressed_size']}"
        )
    if header["total_payload_size2"] != header["total_payload_size"]:
        notes.append(
            f"total_payload_size2 {header['total_payload_size2']} "
            f"!= total_payload_size {header['total_payload_size']}"
        )
    return notes
