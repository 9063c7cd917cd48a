"""GET /v1/periods - date-range presets for the dashboard selector"""

from fastapi import APIRouter

from ledger_insights.api.v1.schemas import PeriodSchema, PeriodsResponse
from ledger_insights.domain.periods import list_presets

router = APIRouter()


@router.get("/periods", response_model=PeriodsResponse)
def get_periods():
    """List presets with their windows relative to today"""
    return PeriodsResponse(
        periods=[
            PeriodSchema(
                id=preset.id,
                label=preset.label,
                months=preset.months,
                description=preset.description,
                start=date_range.start,
                end=date_range.end,
            )
            for preset, date_range in list_presets()
        ]
    )
