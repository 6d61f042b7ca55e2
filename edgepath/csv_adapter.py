"""Delimited edge-list adapter — parses edge files into canonical edges."""

from __future__ import annotations

import csv
from typing import TYPE_CHECKING

from edgepath.errors import InputReadError, MalformedRecordError
from edgepath.logger import logger
from edgepath.model import U32_MAX, CsvConfig, Edge

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


def read_edges(path: Path, config: CsvConfig | None = None) -> Iterator[Edge]:
    """Yield one Edge per data record of *path*.

    Errors are raised lazily: the file is opened on the first request and a
    broken record raises only when it is reached. A leading UTF-8 byte order
    mark is dropped. Node IDs are decimal digits with an optional ``+`` sign.
    """
    from pathlib import Path as _Path

    cfg = config or CsvConfig()
    p = _Path(str(path))

    try:
        fh = p.open(encoding="utf-8-sig", newline="")
    except FileNotFoundError:
        raise InputReadError(f"File not found: {path}") from None
    except OSError as e:
        raise InputReadError(f"Cannot read file {path}: {e}") from None

    count = 0
    with fh:
        reader = csv.reader(fh, delimiter=cfg.delimiter)
        header_pending = cfg.has_header
        try:
            for record in reader:
                if not record:
                    continue
                if header_pending:
                    header_pending = False
                    logger.debug("Skipping header in %s: %s", path, record)
                    continue
                yield _parse_record(record, reader.line_num, cfg.strip_whitespace)
                count += 1
        except csv.Error as e:
            raise MalformedRecordError(str(e), reader.line_num) from e
        except UnicodeDecodeError as e:
            raise InputReadError(f"{path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise InputReadError(f"Cannot read file {path}: {e}") from None

    logger.debug("Read %d edge(s) from %s", count, path)


def _parse_record(record: list[str], line: int, strip: bool) -> Edge:
    if len(record) != 2:
        raise MalformedRecordError(f"record length {len(record)}", line)
    start = _parse_node_id(record[0], line, strip)
    end = _parse_node_id(record[1], line, strip)
    return Edge(start=start, end=end)


def _parse_node_id(raw: str, line: int, strip: bool) -> int:
    text = raw.strip() if strip else raw
    if not text:
        raise MalformedRecordError("empty node ID", line)
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()):
        raise MalformedRecordError(f"invalid node ID {raw!r}", line)
    value = int(digits)
    if value > U32_MAX:
        raise MalformedRecordError(f"node ID {value} exceeds {U32_MAX}", line)
    return value
