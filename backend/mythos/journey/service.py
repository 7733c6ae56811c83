"""Journey service: submissions, teacher verification and standings."""
import os
import logging
from datetime import datetime, UTC
from typing import Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import (
    JourneyTitle, MediaCategory, Student, Submission, SystemSetting,
    MAIN_LOGO_SETTING, VERIFICATION_SETTING,
)
from ..notifications import NotificationError, compose_update
from ..scoring import (
    AlreadyVerified, InvalidSubmissionReference, JourneyConfig, JourneyError,
    DEFAULT_TIERS, RankedEntry, RosterEntry, Tier,
    aggregate, build_leaderboard, compute_submission_points, normalize_image_url,
    parse_category, resolve_logo_url, resolve_tier, total_points_for, validate_image_url, validate_tier_table,
)
from .schemas import BatchVerifyResult, OperationResult, TierImageReport

logger = logging.getLogger(__name__)

# Used when the settings table has no verification row yet
DEFAULT_VERIFICATION_ENABLED = os.getenv("MYTHOS_VERIFICATION_ENABLED", "true").lower() == "true"


class JourneyService:
    def __init__(self, db: Session, notifier=None):
        self.db = db
        self.notifier = notifier

    # -- configuration -------------------------------------------------

    def load_config(self) -> JourneyConfig:
        """Build the engine configuration from the settings tables."""
        rows = self.db.query(JourneyTitle).order_by(JourneyTitle.points).all()
        tiers = tuple(
            Tier(points=row.points, title=row.title, message=row.message or "", image_url=row.image_url or "")
            for row in rows
        )
        if tiers:
            try:
                validate_tier_table(tiers)
            except ValueError as e:
                logger.warning(f"Title table is misconfigured: {e}")
        settings = {setting.key: setting for setting in self.db.query(SystemSetting).all()}
        verification = settings.get(VERIFICATION_SETTING)
        logo = settings.get(MAIN_LOGO_SETTING)
        return JourneyConfig(
            tiers=tiers,
            verification_enabled=verification.is_enabled if verification else DEFAULT_VERIFICATION_ENABLED,
            main_logo_url=(logo.value or "") if logo else "",
        )

    def seed_defaults(self, verification_enabled: Optional[bool] = None) -> OperationResult:
        """Create the default title table and system settings where missing.

        Existing titles are left alone; the verification toggle is only
        overwritten when ``verification_enabled`` is given.
        """
        try:
            if self.db.query(JourneyTitle).first() is None:
                for tier in DEFAULT_TIERS:
                    self.db.add(JourneyTitle(
                        points=tier.points, title=tier.title, message=tier.message, image_url=tier.image_url,
                    ))
                logger.info(f"Seeded {len(DEFAULT_TIERS)} default titles")

            toggle = self.db.get(SystemSetting, VERIFICATION_SETTING)
            if toggle is None:
                enabled = DEFAULT_VERIFICATION_ENABLED if verification_enabled is None else verification_enabled
                self.db.add(SystemSetting(key=VERIFICATION_SETTING, value="TRUE" if enabled else "FALSE"))
            elif verification_enabled is not None:
                toggle.value = "TRUE" if verification_enabled else "FALSE"

            if self.db.get(SystemSetting, MAIN_LOGO_SETTING) is None:
                self.db.add(SystemSetting(key=MAIN_LOGO_SETTING, value=""))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error seeding journey settings: {e}")
            return OperationResult.error(f"Could not set up journey settings: {e}")
        return OperationResult.success("Mythos Ascendant settings have been successfully set up!")

    # -- store helpers -------------------------------------------------

    def _student_submissions(self, email: str) -> list[Submission]:
        return self.db.query(Submission).filter(Submission.student_email == email).all()

    def _total_points(self, email: str) -> int:
        return total_points_for(self._student_submissions(email), email)

    def _count_submissions(self, email: str, media_type: MediaCategory) -> int:
        return (
            self.db.query(Submission)
            .filter(Submission.student_email == email, Submission.media_type == media_type)
            .count()
        )

    def _ensure_student(self, email: str) -> Student:
        student = self.db.query(Student).filter(Student.email == email).first()
        if student is None:
            student = Student(email=email, name="", class_period="")
            self.db.add(student)
            logger.info(f"Added {email} to the roster")
        return student

    def _get_submission(self, submission_id) -> Submission:
        if isinstance(submission_id, bool) or not isinstance(submission_id, int) or submission_id < 1:
            raise InvalidSubmissionReference(submission_id)
        submission = self.db.get(Submission, submission_id)
        if submission is None:
            raise InvalidSubmissionReference(submission_id)
        return submission

    def _notify(self, email: str, old_tier: Tier, config: JourneyConfig) -> bool:
        """Send the student their new standing; failures are logged, not raised."""
        if self.notifier is None:
            return False
        try:
            new_total = self._total_points(email)
            new_tier = resolve_tier(new_total, config.tiers)
            update = compose_update(email, new_total, old_tier, new_tier, config.main_logo_url)
            self.notifier.send(update)
        except (NotificationError, SQLAlchemyError) as e:
            logger.warning(f"Could not send journey update to {email}: {e}")
            return False
        return True

    # -- operations ----------------------------------------------------

    def submit(
        self,
        student_email: str,
        category,
        title: str = "",
        bonus_requested: bool = False,
        reflection: str = "",
    ) -> OperationResult:
        """Record a submission and award its points unless verification is on."""
        email = (student_email or "").strip()
        try:
            config = self.load_config()
            media_type = parse_category(category)
            prior_count = self._count_submissions(email, media_type)
            points = compute_submission_points(
                media_type, prior_count, bonus_requested, config.rules, config.bonus_points,
            )
            old_tier = resolve_tier(self._total_points(email), config.tiers)

            self._ensure_student(email)
            submission = Submission(
                student_email=email,
                media_type=media_type,
                media_title=title or "",
                bonus_points=bool(bonus_requested),
                reflection=reflection or "",
                # Pending submissions are worth nothing until a teacher verifies them
                points=0 if config.verification_enabled else points,
                verified=False,
            )
            self.db.add(submission)
            self.db.commit()
        except JourneyError as e:
            self.db.rollback()
            logger.warning(f"Submission rejected for {email}: {e}")
            return OperationResult.error(f"An error occurred during submission: {e}")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error recording submission for {email}: {e}")
            return OperationResult.error(f"An error occurred during submission: {e}")

        logger.info(f"Recorded submission {submission.id} for {email} ({media_type.value}, {points} pts)")
        if config.verification_enabled:
            return OperationResult.success("Submission received! Your submission is pending teacher verification.")
        if self._notify(email, old_tier, config):
            return OperationResult.success(
                "Submission received! An email has been sent to you with an update on your points."
            )
        return OperationResult.success(
            "Submission received! Your points were added, but the update email could not be sent."
        )

    def verify(self, submission_id: int) -> OperationResult:
        """Recompute a pending submission's points and mark it verified."""
        try:
            config = self.load_config()
            submission = self._get_submission(submission_id)
            if submission.verified:
                raise AlreadyVerified(submission_id)

            email = submission.student_email
            old_tier = resolve_tier(self._total_points(email), config.tiers)
            # Every other row for this student and category counts as prior
            prior_count = max(0, self._count_submissions(email, submission.media_type) - 1)
            points = compute_submission_points(
                submission.media_type, prior_count, submission.bonus_points, config.rules, config.bonus_points,
            )

            submission.points = points
            submission.verified = True
            submission.verified_at = datetime.now(UTC)
            self.db.commit()
        except JourneyError as e:
            self.db.rollback()
            logger.warning(f"Verification of submission {submission_id} failed: {e}")
            return OperationResult.error(f"Error verifying submission: {e}")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error verifying submission {submission_id}: {e}")
            return OperationResult.error(f"Error verifying submission: {e}")

        logger.info(f"Verified submission {submission_id} for {email}: {points} pts")
        if self._notify(email, old_tier, config):
            return OperationResult.success("Submission verified successfully and student has been notified.")
        return OperationResult.success("Submission verified successfully.")

    def verify_batch(self, submission_ids: Iterable[int]) -> list[BatchVerifyResult]:
        """Verify each submission independently, reporting every outcome."""
        results = []
        for submission_id in submission_ids:
            result = self.verify(submission_id)
            results.append(BatchVerifyResult(id=submission_id, status=result.status, message=result.message))
        verified = sum(1 for r in results if r.status == "success")
        logger.info(f"Batch verification: {verified}/{len(results)} succeeded")
        return results

    def list_pending(self) -> list[Submission]:
        return (
            self.db.query(Submission)
            .filter(Submission.verified.is_(False))
            .order_by(Submission.id)
            .all()
        )

    def list_class_groups(self) -> list[str]:
        periods = {
            (period or "").strip()
            for (period,) in self.db.query(Student.class_period).all()
        }
        return sorted(p for p in periods if p)

    def get_roster(self) -> list[RosterEntry]:
        """Recompute every student's total and title from the submission log."""
        config = self.load_config()
        submissions = self.db.query(Submission).order_by(Submission.id).all()
        profiles = {student.email: student for student in self.db.query(Student).all()}
        return aggregate(submissions, config.tiers, profiles)

    def get_leaderboard(self, class_filter: Optional[str] = None) -> list[RankedEntry]:
        return build_leaderboard(self.get_roster(), class_filter)

    def update_student(
        self,
        email: str,
        name: Optional[str] = None,
        class_period: Optional[str] = None,
    ) -> Student:
        """Set a student's name and/or class period, adding them if needed."""
        student = self._ensure_student(email.strip())
        if name is not None:
            student.name = name.strip()
        if class_period is not None:
            student.class_period = class_period.strip()
        self.db.commit()
        self.db.refresh(student)
        return student

    def list_tiers(self) -> tuple[Tier, ...]:
        return self.load_config().tiers

    def audit_tier_images(self) -> list[TierImageReport]:
        """Report how each title's badge URL resolves."""
        reports = []
        for tier in self.load_config().tiers:
            url = normalize_image_url(tier.image_url)
            reports.append(TierImageReport(
                title=tier.title,
                raw_url=tier.image_url,
                url=url,
                valid=validate_image_url(url),
                placeholder="placehold.co" in url,
            ))
        return reports

    def get_main_logo_url(self) -> str:
        """Normalized main logo URL, or an empty string when there is none."""
        return resolve_logo_url(self.load_config().main_logo_url)
