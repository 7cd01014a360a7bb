"""Sample file readers.

Sample files hold one ``x, y`` pair per line with no header. Extra columns
are ignored. The reader is picked from the file suffix:

    - ``.csv``: comma-separated
    - ``.dat``, ``.txt``, ``.out``: whitespace-separated, ``#`` comments allowed
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import numpy as np
import pandas as pd

from extrapfit.core.domain.samples import SampleSet
from extrapfit.core.shared.exceptions import DataIOError, InsufficientDataError

Reader = Callable[[Path, str | None], pd.DataFrame]

READERS: dict[str, Reader] = {}

MIN_SAMPLES = 2


def register_reader(file_types: str | Iterable[str]) -> Callable[[Reader], Reader]:
    """Decorator to register a reader function for specific file suffixes."""
    if isinstance(file_types, str):
        file_types = [file_types]

    def decorator(fn: Reader) -> Reader:
        for ft in file_types:
            READERS[ft] = fn
        return fn

    return decorator


def _read_table(path: Path, sep: str) -> pd.DataFrame:
    try:
        return pd.read_csv(
            path,
            sep=sep,
            header=None,
            comment="#",
            skip_blank_lines=True,
            float_precision="round_trip",
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        msg = f"Could not parse sample file {path}: {e}"
        raise DataIOError(msg) from e


@register_reader("csv")
def read_csv_samples(path: Path, delimiter: str | None = None) -> pd.DataFrame:
    """Read comma-separated samples."""
    return _read_table(path, delimiter or ",")


@register_reader(["dat", "txt", "out"])
def read_whitespace_samples(path: Path, delimiter: str | None = None) -> pd.DataFrame:
    """Read whitespace-separated samples."""
    return _read_table(path, delimiter or r"\s+")


def _to_sample_set(table: pd.DataFrame, path: Path) -> SampleSet:
    if table.empty:
        msg = f"Sample file {path} contains no samples"
        raise InsufficientDataError(msg)
    if table.shape[1] < 2:
        msg = f"Sample file {path} must have two columns (x, y), found {table.shape[1]}"
        raise DataIOError(msg)

    columns = table.iloc[:, :2].apply(pd.to_numeric, errors="coerce")
    bad_rows = columns.isna().any(axis=1)
    if bad_rows.any():
        first = int(np.flatnonzero(bad_rows.to_numpy())[0]) + 1
        msg = f"Sample file {path} has a non-numeric or missing value in data row {first}"
        raise DataIOError(msg)

    if len(columns) < MIN_SAMPLES:
        msg = f"Sample file {path} has {len(columns)} sample(s), at least {MIN_SAMPLES} are required"
        raise InsufficientDataError(msg)

    x = columns.iloc[:, 0].to_numpy(dtype=np.float64)
    y = columns.iloc[:, 1].to_numpy(dtype=np.float64)
    try:
        return SampleSet(x, y)
    except ValueError as e:
        msg = f"Invalid samples in {path}: {e}"
        raise DataIOError(msg) from e


def read_samples(
    path: Path,
    delimiter: str | None = None,
    *,
    rescale: bool = False,
) -> SampleSet:
    """Read a sample file into a SampleSet.

    Args:
        path: Path to the sample file
        delimiter: Column delimiter; None picks one from the file suffix
        rescale: Divide x by its maximum value

    Raises
    ------
        DataIOError: Missing file, unsupported suffix or malformed content
        InsufficientDataError: Fewer than two samples
    """
    path = Path(path)
    if not path.exists():
        msg = f"Sample file not found: {path}"
        raise DataIOError(msg)

    suffix = path.suffix.lstrip(".").lower()
    reader = READERS.get(suffix)
    if reader is None:
        if delimiter is None:
            msg = f"Unsupported sample file type '{path.suffix}'. Supported: {', '.join(sorted(READERS))}"
            raise DataIOError(msg)
        reader = read_whitespace_samples

    samples = _to_sample_set(reader(path, delimiter), path)
    return samples.rescaled() if rescale else samples


def write_samples(samples: SampleSet, path: Path, delimiter: str = ",") -> None:
    """Write samples as ``x<delimiter>y`` lines, most expensive last."""
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = pd.DataFrame({"x": samples.x * samples.x_scale, "y": samples.y})
    frame.to_csv(path, sep=delimiter, header=False, index=False, float_format="%.17g")
