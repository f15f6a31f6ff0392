"""Delete a chunk by extending the preceding chunk's band over it."""

import logging
from collections.abc import Sequence
from dataclasses import replace

from heatpanel.models.edit import DeleteResult
from heatpanel.models.profile import Chunk, HalfHourlyRecord

logger = logging.getLogger(__name__)


def delete_chunk(records: Sequence[HalfHourlyRecord], chunk: Chunk) -> DeleteResult:
    """Merge `chunk` into the band of the record just before it.

    Deleting the first chunk, or a chunk whose start is not in `records`,
    is a no-op: the input comes back unchanged with changed=False.
    """
    start = next(
        (i for i, r in enumerate(records) if r.from_time == chunk.start_time), -1
    )
    if start <= 0:
        logger.debug("No preceding record for chunk at %s; delete ignored", chunk.start_time)
        return DeleteResult(records=list(records), changed=False)

    prev = records[start - 1]
    merged = [
        replace(r, low_temp=prev.low_temp, high_temp=prev.high_temp)
        if chunk.start_time <= r.from_time <= chunk.end_time
        else r
        for r in records
    ]
    return DeleteResult(records=merged, changed=merged != list(records))
