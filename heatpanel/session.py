"""In-memory editing session for one temperature profile."""

import logging
import uuid
from dataclasses import replace
from datetime import date

from heatpanel.ingest.profile_adapter import build_save_payload
from heatpanel.models.common import DayOfWeek
from heatpanel.models.edit import ChunkEdit
from heatpanel.models.profile import Chunk, HalfHourlyRecord, Profile, default_day
from heatpanel.schedule.compressor import compress
from heatpanel.schedule.deleter import delete_chunk
from heatpanel.schedule.editor import DEFAULT_MIN_BAND_WIDTH, apply_edit

logger = logging.getLogger(__name__)

NEW_PROFILE_NAME = "New Profile"


class ProfileSaveError(ValueError):
    """Raised when a profile fails its pre-save checks."""


def new_profile(
    all_profiles: dict[str, Profile],
    today: date | None = None,
    low_temp: float = 18.0,
    high_temp: float = 21.0,
) -> Profile:
    """A fresh profile: active for a year, no days, uniform default band."""
    today = today or date.today()
    try:
        next_year = today.replace(year=today.year + 1)
    except ValueError:  # 29 Feb
        next_year = today.replace(year=today.year + 1, day=28)
    return Profile(
        profile_key=str(uuid.uuid4()),
        name=NEW_PROFILE_NAME,
        priority=max([0] + [p.priority for p in all_profiles.values()]) + 1,
        from_date=today.isoformat(),
        to_date=next_year.isoformat(),
        days_of_week=(),
        records=tuple(default_day(low_temp, high_temp)),
    )


class ProfileEditSession:
    """Holds one profile's edits until saved.

    Every change replaces the record list wholesale; the loaded profile is
    kept so unsaved changes can be detected.
    """

    def __init__(
        self,
        profile: Profile,
        all_profiles: dict[str, Profile] | None = None,
        is_new: bool = False,
        min_band_width: float = DEFAULT_MIN_BAND_WIDTH,
    ):
        self.original = profile
        self.all_profiles = all_profiles or {}
        self.is_new = is_new
        self.min_band_width = min_band_width
        self.name = profile.name
        self.from_date = profile.from_date
        self.to_date = profile.to_date
        self.days: set[DayOfWeek] = set(profile.days_of_week)
        self.records: list[HalfHourlyRecord] = list(profile.records)

    @property
    def is_default(self) -> bool:
        return not self.is_new and self.original.is_default

    @property
    def can_delete_profile(self) -> bool:
        return not (self.is_default or self.is_new)

    @property
    def has_changes(self) -> bool:
        return (
            self.name != self.original.name
            or self.from_date != self.original.from_date
            or self.to_date != self.original.to_date
            or self.days != set(self.original.days_of_week)
            or self.records != list(self.original.records)
        )

    # --- Chunks ---

    def chunks(self) -> list[Chunk]:
        return compress(self.records)

    def select_chunk(self, index: int) -> Chunk:
        chunks = self.chunks()
        if not 0 <= index < len(chunks):
            raise IndexError(f"No chunk {index}; profile has {len(chunks)}")
        return chunks[index]

    def submit_edit(self, edit: ChunkEdit) -> list[Chunk]:
        """Apply an edit and return the recomputed chunks.

        Raises ChunkEditError and leaves the session untouched on bad input.
        """
        if edit.chunk_index is not None:
            self.select_chunk(edit.chunk_index)
        self.records = apply_edit(self.records, edit, self.min_band_width)
        return self.chunks()

    def delete_chunk(self, index: int) -> bool:
        """Merge chunk `index` into its predecessor. Returns whether anything changed."""
        result = delete_chunk(self.records, self.select_chunk(index))
        if result.changed:
            self.records = result.records
        return result.changed

    # --- Metadata (fixed for the default profile) ---

    def rename(self, name: str) -> None:
        if not self.is_default:
            self.name = name.strip()

    def set_date_range(self, from_date: str, to_date: str) -> None:
        if not self.is_default:
            self.from_date, self.to_date = from_date, to_date

    def toggle_day(self, day: DayOfWeek) -> None:
        if self.is_default:
            return
        if day in self.days:
            self.days.discard(day)
        else:
            self.days.add(day)

    # --- Save ---

    def validate_for_save(self) -> None:
        if self.is_default:
            return
        others = [
            p.name for p in self.all_profiles.values()
            if p.profile_key != self.original.profile_key
        ]
        if self.name in others:
            raise ProfileSaveError(
                "A profile with this name already exists. Please choose a unique name."
            )
        try:
            starts, ends = date.fromisoformat(self.from_date), date.fromisoformat(self.to_date)
        except ValueError as e:
            raise ProfileSaveError(f"Invalid active date: {e}") from e
        if starts >= ends:
            raise ProfileSaveError("The 'Active From' date must be before the 'Active To' date.")

    def to_profile(self) -> Profile:
        days = tuple(d for d in DayOfWeek if d in self.days)
        return replace(
            self.original,
            name=self.name,
            from_date=self.from_date,
            to_date=self.to_date,
            days_of_week=days,
            records=tuple(self.records),
        )

    def save_payload(self) -> dict:
        """Validated save document for the profile store."""
        self.validate_for_save()
        original_name = None if self.is_new else self.original.name
        return build_save_payload(self.to_profile(), original_name)
