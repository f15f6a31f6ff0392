"""Compress half-hourly records into contiguous same-band chunks."""

from collections.abc import Sequence

from heatpanel.models.profile import Chunk, HalfHourlyRecord, TemperatureBounds


def compress(records: Sequence[HalfHourlyRecord]) -> list[Chunk]:
    """Group consecutive records sharing (low_temp, high_temp) into chunks.

    The k-th chunk returned is always the k-th maximal run in record order.
    """
    runs: list[tuple[int, int]] = []
    start = 0
    for i in range(1, len(records) + 1):
        if i == len(records) or records[i].band != records[i - 1].band:
            runs.append((start, i - 1))
            start = i

    chunks = []
    for index, (first, last) in enumerate(runs):
        chunks.append(
            Chunk(
                index=index,
                start_time=records[first].from_time,
                end_time=records[last].from_time,
                low_temp=records[first].low_temp,
                high_temp=records[first].high_temp,
                start_index=first,
                end_index=last,
                is_first=index == 0,
                is_last=index == len(runs) - 1,
            )
        )
    return chunks


def expand(chunks: Sequence[Chunk]) -> list[tuple[float, float]]:
    """Per-slot (low, high) bands rebuilt from a chunk sequence."""
    bands: list[tuple[float, float]] = []
    for chunk in chunks:
        bands.extend([chunk.band] * chunk.slot_count)
    return bands


def chunk_at(chunks: Sequence[Chunk], from_time: str) -> Chunk | None:
    """Return the chunk whose slots include `from_time`."""
    for chunk in chunks:
        if chunk.start_time <= from_time <= chunk.end_time:
            return chunk
    return None


def temperature_bounds(records: Sequence[HalfHourlyRecord]) -> TemperatureBounds | None:
    """Lowest low and highest high across records, or None with no data."""
    if not records:
        return None
    return TemperatureBounds(
        min_temp=min(r.low_temp for r in records),
        max_temp=max(r.high_temp for r in records),
    )
