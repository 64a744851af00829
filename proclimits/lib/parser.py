"""Parser for the /proc/<pid>/limits table."""

from typing import TYPE_CHECKING, Iterable, Iterator

from proclimits.lib.limits import Limits

if TYPE_CHECKING:
    from proclimits.core.logging import QueryLogger

# The label column is padded so that soft limits always start here.
LABEL_WIDTH = 26


def _numbered_lines(
    lines: Iterable[str | bytes],
    logger: "QueryLogger | None" = None,
) -> Iterator[tuple[int, str]]:
    for lineno, raw in enumerate(lines, start=1):
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                if logger is not None:
                    logger.row_skipped(lineno, "undecodable", error=str(e))
                continue
        yield lineno, raw.rstrip("\r\n")


def iter_lines(
    lines: Iterable[str | bytes],
    logger: "QueryLogger | None" = None,
) -> Iterator[str]:
    """
    Decode and strip line endings from raw table lines.

    Args:
        lines: Text or UTF-8 byte lines, e.g. an open file
        logger: Receives a row_skipped entry for each undecodable line

    Yields:
        Lines without their trailing newline
    """
    for _, line in _numbered_lines(lines, logger=logger):
        yield line


def split_row(line: str) -> tuple[str, str, str] | None:
    """
    Split a table row into label, soft and hard columns.

    Example row:
        Max open files            1024                 524288               files

    Returns:
        (label, soft, hard), or None if the row is too short or has
        fewer than two value columns
    """
    if len(line) < LABEL_WIDTH:
        return None

    label = line[:LABEL_WIDTH].strip()
    values = line[LABEL_WIDTH:].split()
    if len(values) < 2:
        return None

    # values[2], when present, is the units column
    return label, values[0], values[1]


def parse_limits(
    lines: Iterable[str | bytes],
    logger: "QueryLogger | None" = None,
) -> Limits:
    """
    Parse a limits table into a Limits record.

    The first line is the column header and is always skipped. Malformed
    rows and unknown properties are skipped; the remaining rows still apply.

    Args:
        lines: Table lines, text or bytes, e.g. a file opened in "rb" mode
        logger: Receives a row_skipped entry, keyed by line number, for
            every line that could not be used

    Returns:
        Limits with every recognized row applied
    """
    limits = Limits()
    rows = _numbered_lines(lines, logger=logger)

    # Header
    next(rows, None)

    for lineno, line in rows:
        row = split_row(line)
        if row is None:
            if logger is not None:
                logger.row_skipped(lineno, "malformed", text=line)
            continue
        limits.set_property_from_strings(*row)

    return limits


def parse_limits_text(text: str, logger: "QueryLogger | None" = None) -> Limits:
    """Parse a limits table held in a string, splitting on newlines only."""
    lines = text.split("\n")
    # A trailing newline ends the last row rather than starting an empty one.
    if lines[-1] == "":
        lines.pop()
    return parse_limits(lines, logger=logger)
