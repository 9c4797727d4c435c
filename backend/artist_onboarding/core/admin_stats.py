"""Admin Stats: pure computation of dashboard counts and exports from artist rows.

Invariants:
    - Inputs are plain dicts (built by the admin service), no ORM objects, no IO
    - Counts are integers; missing fields default to empty/0, never raise
    - completed_sections outside 1..4 are ignored

Design Decisions:
    - Pure functions, not ORM methods (ADR: models persist, stats are presentation)
    - csv module for export: quoting of names/studios with commas is the writer's job
"""

import csv
import io

from artist_onboarding.core.domain_types import ArtistStatus, OnboardingSection

TOTAL_SECTIONS = len(OnboardingSection)

EXPORT_COLUMNS = (
    "id", "full_name", "studio_name", "email", "status",
    "completion_percentage", "artwork_count", "variant_count", "last_updated",
)


def _valid_sections(completed_sections) -> set[int]:
    return {s for s in (completed_sections or []) if 1 <= s <= TOTAL_SECTIONS}


def completion_percentage(completed_sections: list[int] | None) -> int:
    """Share of the 4 sections completed, as an integer percentage."""
    return len(_valid_sections(completed_sections)) * 100 // TOTAL_SECTIONS


def compute_status_counts(rows: list[dict]) -> dict:
    """Count artists per review status, plus the total."""
    counts = {"total": len(rows)}
    for status in ArtistStatus:
        counts[status.value] = sum(1 for r in rows if r.get("status") == status.value)
    return counts


def compute_section_counts(rows: list[dict]) -> dict:
    """Count artists that completed each section, and those that completed all."""
    completed = [_valid_sections(r.get("completed_sections")) for r in rows]
    counts = {
        f"section{section.value}": sum(1 for c in completed if section.value in c)
        for section in OnboardingSection
    }
    counts["complete"] = sum(1 for c in completed if len(c) == TOTAL_SECTIONS)
    return counts


def to_csv(rows: list[dict]) -> str:
    """Render export rows as CSV text with a header line."""
    buffer = io.StringIO()
    writer = csv.DictWriter(
        buffer, fieldnames=EXPORT_COLUMNS, extrasaction="ignore", lineterminator="\n",
    )
    writer.writeheader()
    for row in rows:
        writer.writerow({col: row.get(col, "") for col in EXPORT_COLUMNS})
    return buffer.getvalue()
