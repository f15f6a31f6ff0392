"""Plain text and JSON renderings for the CLI."""

import json

from heatpanel.models.profile import Chunk, Profile
from heatpanel.models.status import BoostType, DashboardStatus
from heatpanel.schedule.compressor import compress, temperature_bounds

_BOOST_LABELS = {
    BoostType.HEATING: "heating",
    BoostType.WATER: "hot water",
    BoostType.NONE: "off",
}


def format_status_text(s: DashboardStatus) -> str:
    return "\n".join([
        f"Hello {s.user_name}",
        f"Room: {s.room_temperature:.1f}C (target {s.demand_low:g}-{s.demand_high:g}C)"
        f" | Status: {s.running_status}",
        f"Water: {s.water_temperature:.1f}C | Tank {s.tank_fullness_pct:.0f}% - "
        f"{s.tank_status_text}",
        f"Boost: {_BOOST_LABELS.get(s.boost_type, s.boost_type)}",
        f"Weekly savings: {s.weekly_savings:+.2f}",
    ])


def format_chunk_line(c: Chunk) -> str:
    flags = []
    if c.is_first:
        flags.append("first")
    if c.is_last:
        flags.append("last")
    suffix = f" ({', '.join(flags)})" if flags else ""
    return (
        f"  [{c.index}] {c.start_time}-{c.end_of_period} "
        f"{c.low_temp:g}-{c.high_temp:g}C{suffix}"
    )


def format_chunks_text(chunks: list[Chunk]) -> str:
    if not chunks:
        return "  (no data)"
    return "\n".join(format_chunk_line(c) for c in chunks)


def format_profile_summary(p: Profile) -> str:
    bounds = temperature_bounds(p.records)
    band = f"{bounds.min_temp:g}-{bounds.max_temp:g}C" if bounds else "no data"
    days = ", ".join(d[:3] for d in p.days_of_week)
    if not days:
        days = "all other days" if p.is_default else "no days"
    return (
        f"{p.priority:>3}  {p.name} [{p.profile_key}] {p.from_date} to {p.to_date} "
        f"| {days} | {band}"
    )


def format_profile_detail(p: Profile) -> str:
    return "\n".join([format_profile_summary(p), format_chunks_text(compress(p.records))])


def format_chunks_json(chunks: list[Chunk]) -> str:
    data = [
        {
            "index": c.index,
            "start_time": c.start_time,
            "end_time": c.end_time,
            "low_temp": c.low_temp,
            "high_temp": c.high_temp,
            "is_first": c.is_first,
            "is_last": c.is_last,
        }
        for c in chunks
    ]
    return json.dumps(data, indent=2)
