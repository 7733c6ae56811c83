"""Journey router for submissions, verification and the leaderboard."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..notifications import EmailNotifier, get_notifier
from .schemas import (
    BatchVerifyRequest, BatchVerifyResult, LeaderboardEntryResponse, LogoResponse,
    OperationResult, RosterEntryResponse, SetupRequest, StudentResponse, StudentUpdate,
    SubmissionCreate, SubmissionResponse, TierImageReport, TierResponse,
)
from .service import JourneyService

router = APIRouter(prefix="/journey", tags=["Journey"])


def get_journey_service(
    db: Session = Depends(get_db),
    notifier: EmailNotifier = Depends(get_notifier),
) -> JourneyService:
    """Dependency to get an instance of JourneyService."""
    return JourneyService(db, notifier)


@router.post("/submissions", response_model=OperationResult)
async def create_submission(
    submission: SubmissionCreate,
    service: JourneyService = Depends(get_journey_service),
):
    """Record a student's media submission."""
    return service.submit(
        student_email=submission.student_email,
        category=submission.media_type,
        title=submission.media_title,
        bonus_requested=submission.bonus_points,
        reflection=submission.reflection,
    )


@router.get("/submissions/pending", response_model=list[SubmissionResponse])
async def pending_submissions(service: JourneyService = Depends(get_journey_service)):
    """List submissions still awaiting teacher verification."""
    return service.list_pending()


@router.post("/submissions/verify", response_model=list[BatchVerifyResult])
async def verify_submissions(
    request: BatchVerifyRequest,
    service: JourneyService = Depends(get_journey_service),
):
    """Verify several submissions; each succeeds or fails on its own."""
    return service.verify_batch(request.submission_ids)


@router.post("/submissions/{submission_id}/verify", response_model=OperationResult)
async def verify_submission(
    submission_id: int,
    service: JourneyService = Depends(get_journey_service),
):
    """Verify one submission and award its points."""
    return service.verify(submission_id)


@router.get("/leaderboard", response_model=list[LeaderboardEntryResponse])
async def leaderboard(
    class_period: Optional[str] = Query(default=None),
    service: JourneyService = Depends(get_journey_service),
):
    """Students ranked by points, optionally for one class period."""
    return service.get_leaderboard(class_period)


@router.get("/class-periods", response_model=list[str])
async def class_periods(service: JourneyService = Depends(get_journey_service)):
    return service.list_class_groups()


@router.get("/roster", response_model=list[RosterEntryResponse])
async def roster(service: JourneyService = Depends(get_journey_service)):
    return [
        RosterEntryResponse(
            name=entry.name,
            email=entry.email,
            class_period=entry.class_period,
            total_points=entry.total_points,
            title=entry.title,
        )
        for entry in service.get_roster()
    ]


@router.patch("/students/{email}", response_model=StudentResponse)
async def update_student(
    email: str,
    update: StudentUpdate,
    service: JourneyService = Depends(get_journey_service),
):
    """Set a student's display name or class period."""
    return service.update_student(email, name=update.name, class_period=update.class_period)


@router.get("/tiers", response_model=list[TierResponse])
async def tiers(service: JourneyService = Depends(get_journey_service)):
    return service.list_tiers()


@router.get("/tiers/images", response_model=list[TierImageReport])
async def tier_images(service: JourneyService = Depends(get_journey_service)):
    """Check how each title's badge image URL resolves."""
    return service.audit_tier_images()


@router.get("/logo", response_model=LogoResponse)
async def main_logo(service: JourneyService = Depends(get_journey_service)):
    return {"url": service.get_main_logo_url()}


@router.post("/setup", response_model=OperationResult, status_code=status.HTTP_201_CREATED)
async def setup(
    request: Optional[SetupRequest] = None,
    service: JourneyService = Depends(get_journey_service),
):
    """Create the default title table and system settings."""
    verification_enabled = request.verification_enabled if request else None
    return service.seed_defaults(verification_enabled=verification_enabled)
