"""Main FastAPI application."""

import logging
from datetime import date, datetime
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import FileResponse

from .api.models import (
    HabitCreate,
    HabitListResponse,
    HabitResponse,
    MotivationResponse,
    StatisticsResponse,
    TodayResponse,
)
from .config import settings
from .dashboard.renderer import DashboardRenderer
from .habits.errors import EmptyTrackerError, HabitIndexError
from .habits.models import Habit
from .habits.tracker import HabitTracker, build_tracker

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Habit Tracker",
    description="Track daily habits, streaks and success rates",
    version="1.0.0",
)

# Single in-memory tracker for the process lifetime
tracker = build_tracker(
    load_samples=settings.load_sample_habits,
    seed=settings.motivation_seed,
    bar_width=settings.progress_bar_width,
)
_renderer: Optional[DashboardRenderer] = None


def get_tracker() -> HabitTracker:
    return tracker


def get_renderer() -> DashboardRenderer:
    global _renderer
    if _renderer is None:
        _renderer = DashboardRenderer(settings.dashboard_output_dir, keep=settings.dashboard_keep_images)
    return _renderer


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Habit Tracker",
        "version": "1.0.0",
        "endpoints": {
            "habits": "/api/habits",
            "today": "/api/today",
            "statistics": "/api/statistics",
            "motivation": "/api/motivation",
            "dashboard": "/api/dashboard",
            "status": "/status",
        },
    }


@app.get("/status")
async def status(tracker: HabitTracker = Depends(get_tracker)):
    """Server status endpoint."""
    return {
        "status": "running",
        "version": "1.0.0",
        "timestamp": datetime.now().isoformat(),
        "habits": len(tracker),
    }


@app.get("/api/habits", response_model=HabitListResponse)
async def list_habits(tracker: HabitTracker = Depends(get_tracker)):
    """All habits in display order."""
    return HabitListResponse(
        total=len(tracker),
        habits=[HabitResponse.from_habit(i + 1, h) for i, h in enumerate(tracker.habits)],
    )


@app.post("/api/habits", response_model=HabitResponse, status_code=201)
async def add_habit(body: HabitCreate, tracker: HabitTracker = Depends(get_tracker)):
    """Register a new habit at the end of the list."""
    habit = tracker.add_habit(Habit(body.name, body.category, body.frequency, body.target))
    return HabitResponse.from_habit(len(tracker), habit)


@app.post("/api/habits/{number}/complete", response_model=HabitResponse)
async def complete_habit(
    number: int,
    day: Optional[date] = None,
    tracker: HabitTracker = Depends(get_tracker),
):
    """
    Mark a habit complete.

    `number` is the 1-based position shown in listings; `day` defaults to today.
    """
    try:
        habit = tracker.mark_habit_complete(number - 1, day)
    except HabitIndexError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return HabitResponse.from_habit(number, habit)


@app.get("/api/today", response_model=TodayResponse)
async def today(day: Optional[date] = None, tracker: HabitTracker = Depends(get_tracker)):
    """Completion status for today (or the given day)."""
    return TodayResponse.from_status(tracker.today_status(day))


@app.get("/api/statistics", response_model=StatisticsResponse)
async def statistics(tracker: HabitTracker = Depends(get_tracker)):
    """Aggregate statistics across habits."""
    try:
        stats = tracker.statistics()
    except EmptyTrackerError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return StatisticsResponse.from_statistics(stats)


@app.get("/api/motivation", response_model=MotivationResponse)
async def motivation(tracker: HabitTracker = Depends(get_tracker)):
    return MotivationResponse(message=tracker.motivation())


@app.get("/api/dashboard")
async def dashboard(
    tracker: HabitTracker = Depends(get_tracker),
    renderer: DashboardRenderer = Depends(get_renderer),
):
    """Render today's dashboard and return the PNG."""
    logger.info("Dashboard render requested")
    filename, file_path = renderer.render(tracker.today_status(), tracker.habits)

    return FileResponse(file_path, media_type="image/png", filename=f"{filename}.png")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
