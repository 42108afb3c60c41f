"""HTTP routes for the dtac API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from dtac.api.runtime import ApiState
from dtac.domain.enums import GameMode, LoadErrorKind
from dtac.domain.models import Armour, Damage
from dtac.domain.results import LoadReport
from dtac.domain.store import ConstantsSnapshot

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


def get_loaded_snapshot(state: ApiStateDep) -> ConstantsSnapshot:
    snapshot = state.constants.snapshot()
    if not snapshot.loaded:
        raise HTTPException(status.HTTP_409_CONFLICT, detail="game constants not loaded")
    return snapshot


SnapshotDep = Annotated[ConstantsSnapshot, Depends(get_loaded_snapshot)]


class HealthResponse(BaseModel):
    status: str
    loaded: bool
    game_mode: GameMode


class DamageToArmourEntry(BaseModel):
    damage: str
    armour: str
    factor: float


class ReloadRequest(BaseModel):
    path: str | None = Field(default=None, min_length=1)
    game_mode: GameMode | None = None


class LoadFailureDetail(BaseModel):
    kind: LoadErrorKind
    message: str
    type_name: str | None = None


class LoadReportResponse(BaseModel):
    source: str | None
    game_mode: GameMode
    damage_types: int
    armour_types: int
    matrix_entries: int
    modifiers_applied: int
    duplicate_damage_types: list[str]
    duplicate_armour_types: list[str]

    @classmethod
    def from_report(cls, report: LoadReport) -> LoadReportResponse:
        return cls(
            source=str(report.source) if report.source is not None else None,
            game_mode=report.game_mode,
            damage_types=report.damage_types,
            armour_types=report.armour_types,
            matrix_entries=report.matrix_entries,
            modifiers_applied=report.modifiers_applied,
            duplicate_damage_types=report.duplicate_damage_types,
            duplicate_armour_types=report.duplicate_armour_types,
        )


@router.get("/health", response_model=HealthResponse)
def health_check(state: ApiStateDep) -> HealthResponse:
    """Report whether constants are loaded and for which game mode."""

    # Sync route: snapshot() blocks on the store lock during a reload.
    snapshot = state.constants.snapshot()
    return HealthResponse(status="ok", loaded=snapshot.loaded, game_mode=snapshot.game_mode)


@router.get("/damage-types", response_model=list[str])
async def list_damage_types(snapshot: SnapshotDep) -> list[str]:
    return [damage.name for damage in snapshot.damage]


@router.get("/armour-types", response_model=list[str])
async def list_armour_types(snapshot: SnapshotDep) -> list[str]:
    return [armour.name for armour in snapshot.armour]


@router.get("/damage-to-armour", response_model=list[DamageToArmourEntry])
async def list_damage_to_armour(snapshot: SnapshotDep) -> list[DamageToArmourEntry]:
    return [
        DamageToArmourEntry(damage=entry.damage.name, armour=entry.armour.name, factor=entry.factor)
        for entry in snapshot.entries()
    ]


@router.get("/damage-to-armour/{damage}/{armour}", response_model=DamageToArmourEntry)
async def get_damage_to_armour(
    damage: str, armour: str, snapshot: SnapshotDep
) -> DamageToArmourEntry:
    try:
        factor = snapshot.factor(Damage(damage), Armour(armour))
    except KeyError as exc:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND, detail=f"no damage-to-armour entry for {damage}/{armour}"
        ) from exc
    return DamageToArmourEntry(damage=damage, armour=armour, factor=factor)


@router.post("/reload", response_model=LoadReportResponse)
def reload_constants(payload: ReloadRequest, state: ApiStateDep) -> LoadReportResponse:
    """Reload the constants file, optionally switching file or game mode."""

    try:
        report = state.constants.reload(payload.path, payload.game_mode)
    except FileNotFoundError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except KeyError as exc:
        raise HTTPException(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"kind": "unknown_matrix_pair", "message": f"no matrix entry for {exc}"},
        ) from exc
    if report.failure is not None:
        failure = report.failure
        detail = LoadFailureDetail(
            kind=failure.kind, message=failure.message, type_name=failure.type_name
        )
        raise HTTPException(
            status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail.model_dump(mode="json")
        )
    return LoadReportResponse.from_report(report)
