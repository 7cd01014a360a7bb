"""Output writers for ExtrapFit results (CSV, JSON, plain text)."""

from extrapfit.io.writers.base import OutputWriter, WriterConfig, format_float, format_uncertainty
from extrapfit.io.writers.csv_writer import CSVWriter
from extrapfit.io.writers.json_writer import JSONWriter, NumpyEncoder
from extrapfit.io.writers.text_writer import TextWriter

WRITERS: dict[str, type[OutputWriter]] = {
    "csv": CSVWriter,
    "json": JSONWriter,
    "txt": TextWriter,
}

__all__ = [
    "WRITERS",
    "CSVWriter",
    "JSONWriter",
    "NumpyEncoder",
    "OutputWriter",
    "TextWriter",
    "WriterConfig",
    "format_float",
    "format_uncertainty",
]
