"""
Post-Processor Step - Step 3

Applies the ordered text rules from utils.py to the raw model output.
"""

import logfire
from typing import Optional

from pipeline.core.runner import BasePipelineStep
from pipeline.models.core import PipelineData, StepResult

from .utils import SUBJECT_MARKER, has_closing, post_process


class PostProcessorStep(BasePipelineStep):
    """
    Step 3: Produce canonical email text.

    Updates PipelineData fields:
    - full_email: str
    """

    def __init__(self):
        """Initialize post-processor step."""
        super().__init__(step_name="post_processor")

    async def _validate_input(self, pipeline_data: PipelineData) -> Optional[str]:
        if not pipeline_data.raw_email:
            return "raw_email is missing (email_generator must run first)"
        return None

    async def _execute_step(self, pipeline_data: PipelineData) -> StepResult:
        raw_email = pipeline_data.raw_email
        full_email = post_process(raw_email, pipeline_data.request.tone)

        warnings = []
        if SUBJECT_MARKER not in full_email:
            # Greeting-first output: the splitter falls back to the purpose table
            warnings.append("No subject line in generated email")

        closing_appended = not has_closing(raw_email)

        logfire.info(
            "Email post-processed",
            raw_length=len(raw_email),
            final_length=len(full_email),
            closing_appended=closing_appended,
            warnings_count=len(warnings)
        )

        pipeline_data.full_email = full_email

        return StepResult(
            success=True,
            step_name=self.step_name,
            metadata={
                "closing_appended": closing_appended,
                "final_length": len(full_email)
            },
            warnings=warnings
        )
