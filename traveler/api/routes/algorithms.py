"""Algorithm label catalogue for the algorithm selector."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from traveler.contracts.enums import Algorithm
from traveler.services.algorithm import color_for, display_name

router = APIRouter(prefix="/algorithms", tags=["algorithms"])


@router.get("")
async def list_algorithms() -> list[dict[str, Any]]:
    return [
        {
            "id": algorithm.value,
            "name": display_name(algorithm),
            "color": color_for(algorithm),
        }
        for algorithm in Algorithm
    ]
