"""Pydantic v2 models for layout analysis.

Per-layout topology metrics and aggregate statistics over a batch of
seeds.  All are serializable to/from JSON.
"""

from __future__ import annotations

from pydantic import BaseModel


class LayoutMetrics(BaseModel):
    """Topology metrics of a single layout."""

    seed: int | None = None
    room_count: int
    corridor_count: int
    locked_door_count: int
    dead_end_count: int
    """Rooms of any kind with exactly one edge (open or locked)."""
    branch_room_count: int
    """Rooms with three or more edges."""
    treasure_count: int
    boss_distance: int | None = None
    """Edges between Start and Boss, ignoring locks."""
    key_distance: int | None = None
    """Edges between Start and Key, ignoring locks."""
    key_on_dead_end: bool = False
    boss_gated: bool = False
    """True when the Boss cannot be reached through open corridors alone."""


class BatchMetrics(BaseModel):
    """Aggregate statistics over many layouts."""

    total_layouts: int
    avg_room_count: float
    avg_dead_ends: float
    avg_branch_rooms: float
    avg_treasure_count: float
    avg_boss_distance: float
    gated_rate: float
    """Fraction of layouts whose Boss sits behind the lock."""
    key_dead_end_rate: float
    """Fraction of keyed layouts where the key is on a dead end."""
