import json
import logging
from datetime import datetime, timezone
from typing import Optional

from pydantic import ValidationError

from shippedtoday.core.config import config
from shippedtoday.core.exceptions import (
    CooldownActiveError,
    DuplicateLaunchError,
    InvalidContentTypeError,
    InvalidJSONError,
    LaunchLimitReachedError,
    MaliciousContentError,
    RateLimitExceededError,
    SpamDetectedError,
    SubmissionValidationError,
)
from shippedtoday.core.logging import get_logger
from shippedtoday.core.settings import AppConfig
from shippedtoday.models import Launch, LaunchListResponse, LaunchSubmission
from shippedtoday.repositories import BaseRepository, create_launch_repository
from shippedtoday.services import content_filter
from shippedtoday.services.submission_guard import SubmissionGuard

logger = logging.getLogger(__name__)
launch_logger = get_logger("shippedtoday.launches")


class LaunchService:
    """Launch listing and the submission pipeline"""

    def __init__(
        self,
        repository: Optional[BaseRepository] = None,
        guard: Optional[SubmissionGuard] = None,
        settings: Optional[AppConfig] = None,
    ):
        self.settings = settings or config.app_config
        self.repository = repository or create_launch_repository()
        self.guard = guard or SubmissionGuard(self.settings.anti_spam)
        self.spam_patterns = content_filter.compile_spam_patterns(
            self.settings.anti_spam.spam_patterns)

    def initialize(self) -> None:
        self.repository.initialize()

    async def list_launches(self) -> LaunchListResponse:
        """All launches, newest first"""
        launches = sorted(
            self.repository.list_launches(),
            key=lambda launch: launch.submittedAt,
            reverse=True,
        )
        return LaunchListResponse(launches=launches, total=len(launches))

    async def submit_launch(
        self, body: bytes, client_id: str, content_type: Optional[str]
    ) -> Launch:
        """
        Validate a raw POST body and store the resulting launch

        Checks run in a fixed order and the first failure is raised as a
        LaunchError subclass carrying the HTTP status for the caller.

        Args:
            body: raw request body
            client_id: identifies the submitter for rate limiting
            content_type: the request Content-Type header

        Returns:
            The stored launch
        """
        if self.guard.is_cooldown_active():
            raise CooldownActiveError()

        if self.guard.is_rate_limited(client_id):
            raise RateLimitExceededError(self._rate_limit_message())

        self.guard.record_attempt(client_id)

        if not content_type or "application/json" not in content_type:
            raise InvalidContentTypeError()

        submission = self._parse_submission(body)

        if content_filter.detect_spam(
            submission.title, submission.description, submission.url, self.spam_patterns
        ):
            launch_logger.warning(
                f"Spam pattern detected: title={submission.title!r}, from={client_id}")
            raise SpamDetectedError()

        digest = content_filter.content_hash(
            submission.title, submission.description, submission.url)
        if self.guard.is_duplicate(digest):
            raise DuplicateLaunchError()

        if content_filter.contains_script_scheme(
            submission.title, submission.description, submission.url,
            submission.tweetUrl or "",
        ):
            raise MaliciousContentError()

        self.repository.check_access()

        if self.repository.count() >= self.settings.storage.max_launches:
            raise LaunchLimitReachedError()

        launch = self._build_launch(submission)
        self.repository.add_launch(launch)
        self.guard.remember_submission(digest)

        launch_logger.info(
            f"New launch added: id={launch.id}, title={launch.title!r}, from={client_id}")
        return launch

    def _parse_submission(self, body: bytes) -> LaunchSubmission:
        try:
            payload = json.loads(body)
        except ValueError as e:
            launch_logger.warning(f"Unparseable submission body: {e}")
            raise InvalidJSONError()

        try:
            return LaunchSubmission.model_validate(payload)
        except ValidationError as e:
            details = e.errors(include_url=False, include_context=False)
            launch_logger.warning(f"Submission failed validation: {details}")
            raise SubmissionValidationError(details=details)

    def _build_launch(self, submission: LaunchSubmission) -> Launch:
        rules = self.settings.sanitization
        return Launch(
            id=content_filter.generate_launch_id(),
            title=content_filter.sanitize_text(
                submission.title, rules.min_length, rules.max_length),
            url=submission.url,
            description=content_filter.sanitize_text(
                submission.description, rules.min_length, rules.max_length),
            tags=content_filter.sanitize_tags(submission.tags, rules.max_tag_length),
            submittedAt=datetime.now(timezone.utc),
            tweetUrl=submission.tweetUrl,
        )

    def _rate_limit_message(self) -> str:
        anti_spam = self.settings.anti_spam
        window = anti_spam.rate_limit_window_seconds
        period = "per minute" if window == 60 else f"every {window:g} seconds"
        return (
            f"Rate limit exceeded. You can submit maximum "
            f"{anti_spam.max_attempts_per_window} launches {period}. "
            f"Please try again later."
        )


# Global launch service instance
launch_service = LaunchService()
