"""
StatCoach Data Contracts

The raw stats record accepted from callers (the HTTP layer, the CLI, JSON files).
Field aliases are the wire names and are load-bearing: callers must send exactly
this shape.

Validation is strict. Wrong types (strings, floats, booleans) and negative counts
raise pydantic.ValidationError instead of being coerced.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GameStatsPayload(BaseModel):
    """One team's box score for one match, in wire shape."""

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    total_kills: int = Field(0, ge=0, alias="totalKills", description="Kills")
    kill_attempts: int = Field(0, ge=0, alias="killAttempts", description="Attack attempts")
    attack_errors: int = Field(0, ge=0, alias="attackErrors", description="Attack errors")
    service_aces: int = Field(0, ge=0, alias="serviceAces", description="Service aces")
    service_errors: int = Field(0, ge=0, alias="serviceErrors", description="Service errors")
    reception_errors: int = Field(0, ge=0, alias="receptionErrors", description="Reception errors")
    digs: int = Field(0, ge=0, alias="digs", description="Digs")
    solo_blocks: int = Field(0, ge=0, alias="soloBlocks", description="Solo blocks")
    block_assists: int = Field(0, ge=0, alias="blockAssists", description="Block assists")
    # Absent or 0 means "unknown"; normalization then assumes a 3-set match
    total_sets: int | None = Field(None, ge=0, alias="totalSets", description="Sets played")

    opponent: str | None = Field(None, description="Opponent name")
    game_date: str | None = Field(None, alias="gameDate", description="Match date")
