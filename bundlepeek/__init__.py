from .constants import VERSION
from .header import (
    read_header,
    parse_bundle_header,
    compute_block_count,
    block_table_end,
    read_block_sizes,
    find_anomalies,
)

__version__ = VERSION
