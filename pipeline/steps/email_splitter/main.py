"""
Email Splitter Step - Step 4

Derives subject and body from the canonical email text.
"""

import logfire
from typing import Optional

from pipeline.core.runner import BasePipelineStep
from pipeline.models.core import PipelineData, StepResult

from .utils import extract_subject, split_email


class EmailSplitterStep(BasePipelineStep):
    """
    Step 4: Split subject and body.

    Updates PipelineData fields:
    - subject: str
    - body: str
    """

    def __init__(self):
        """Initialize email splitter step."""
        super().__init__(step_name="email_splitter")

    async def _validate_input(self, pipeline_data: PipelineData) -> Optional[str]:
        if not pipeline_data.full_email:
            return "full_email is missing (post_processor must run first)"
        return None

    async def _execute_step(self, pipeline_data: PipelineData) -> StepResult:
        used_fallback = not extract_subject(pipeline_data.full_email)
        subject, body = split_email(
            pipeline_data.full_email,
            pipeline_data.request.purpose
        )

        if used_fallback:
            logfire.warning(
                "Using fallback subject",
                purpose=pipeline_data.request.purpose.value,
                subject=subject
            )

        pipeline_data.subject = subject
        pipeline_data.body = body

        return StepResult(
            success=True,
            step_name=self.step_name,
            metadata={
                "subject_length": len(subject),
                "used_fallback_subject": used_fallback
            }
        )
