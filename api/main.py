"""
FastAPI wrapper for the almanac calendar converter.

Provides HTTP endpoints for converting dates between calendars.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Any, Dict, List, Optional
import logging

# Import backend (installed as editable package)
from almanac import __version__
from almanac.core.calendar import CalendarKind, CALENDAR_NAMES
from almanac.core.errors import CalendarError
from almanac.dates import calendar_type
from almanac.schema import (
    CalendarDateSpec,
    ConversionRequest,
    ConversionResult,
    ConvertedDate,
    convert_request,
    describe_date,
)

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Almanac Calendar API",
    description="API for converting dates between Gregorian, Julian, Islamic, Persian and Hebrew calendars",
    version=__version__,
)

# CORS for UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:3001",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==============================================================================
# Request/Response Models
# ==============================================================================

class ConvertRequest(BaseModel):
    """Request body for /convert endpoint."""
    source: Dict[str, Any]
    targets: Optional[List[str]] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class CalendarInfo(BaseModel):
    """Calendar description."""
    calendar: CalendarKind
    name: str
    epoch: float
    month_names: List[str]
    weekday_names: List[str]


class YearInfo(BaseModel):
    """Leap status and month lengths of one calendar year."""
    calendar: CalendarKind
    year: int
    leap: bool
    months: int
    month_lengths: List[int]
    days: int


# ==============================================================================
# Endpoints
# ==============================================================================

def _calendar_or_404(calendar: str):
    try:
        return calendar_type(calendar)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown calendar: {calendar}")


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/calendars", response_model=List[CalendarInfo])
async def list_calendars():
    """List supported calendars with their name tables."""
    infos = []
    for kind in CalendarKind:
        cls = calendar_type(kind)
        infos.append(CalendarInfo(
            calendar=kind,
            name=CALENDAR_NAMES[kind],
            epoch=cls.epoch.value,
            month_names=list(cls.month_names),
            weekday_names=list(cls.weekday_names),
        ))
    return infos


@app.get("/calendars/{calendar}/years/{year}", response_model=YearInfo)
async def year_info(calendar: str, year: int):
    """Leap status and month lengths of a year."""
    cls = _calendar_or_404(calendar)
    try:
        lengths = cls.month_lengths(year)
    except CalendarError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return YearInfo(
        calendar=cls.kind,
        year=year,
        leap=cls.leap_year(year),
        months=len(lengths),
        month_lengths=list(lengths),
        days=sum(lengths),
    )


@app.get("/today/{calendar}", response_model=ConvertedDate)
async def today(calendar: str):
    """Today's date (UTC) in a calendar."""
    cls = _calendar_or_404(calendar)
    return describe_date(cls.today())


@app.post("/convert", response_model=ConversionResult)
async def convert_date(request: ConvertRequest):
    """
    Convert a date into other calendars.

    Body: {"source": {"calendar", "year", "month", "day"}, "targets": [...]}
    Returns the day count, weekday index and the date in each target.
    """
    try:
        parsed = ConversionRequest(
            source=CalendarDateSpec(**request.source),
            targets=request.targets,
        )
    except (ValueError, TypeError) as e:
        raise HTTPException(
            status_code=422,
            detail=f"Invalid conversion request: {str(e)}"
        )

    try:
        return convert_request(parsed)
    except CalendarError as e:
        logger.warning(f"Conversion failed for {parsed.source}: {e}")
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/validate", response_model=CalendarDateSpec)
async def validate_date(spec: Dict[str, Any]):
    """Validate a date against its calendar's month lengths."""
    try:
        return CalendarDateSpec(**spec)
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=422, detail=f"Invalid date: {str(e)}")


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
