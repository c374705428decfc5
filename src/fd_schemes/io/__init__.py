from .input import parse_config, read_config
from .output import snapshot_frame, write_grid, write_snapshot

__all__ = [
    "read_config",
    "parse_config",
    "write_snapshot",
    "write_grid",
    "snapshot_frame",
]
