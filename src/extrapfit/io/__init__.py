"""Input/output: sample files, configuration files and result writers."""

from extrapfit.io.config import generate_default_config, load_config, save_config
from extrapfit.io.samples import READERS, read_samples, register_reader, write_samples

__all__ = [
    "READERS",
    "generate_default_config",
    "load_config",
    "read_samples",
    "register_reader",
    "save_config",
    "write_samples",
]
