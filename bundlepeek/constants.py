VERSION = "0.1.0"

DEFAULT_BUNDLE_URL = "https://patch.poecdn.com/3.25.3.4/Bundles2/Metadata/Shrines.bundle.bin"
EXPECTED_SHRINES_SIZE = 5012

RECOGNIZED_HOSTS = (
    "https://patch.poecdn.com/",
    "https://patch-poe2.poecdn.com/",
)

# Bundle header layout (little-endian)
OFF_UNCOMPRESSED_SIZE = 0
OFF_TOTAL_PAYLOAD_SIZE = 4
OFF_HEAD_PAYLOAD_SIZE = 8
OFF_FIRST_FILE_ENCODE = 12
OFF_UNK10 = 16
OFF_UNCOMPRESSED_SIZE2 = 20
OFF_TOTAL_PAYLOAD_SIZE2 = 28
OFF_BLOCK_COUNT = 36
OFF_GRANULARITY = 40
OFF_UNK28 = 44
OFF_BLOCK_SIZES = 60

BLOCK_SIZE_ENTRY = 4
