"""
Metadata Calculator Step - Step 5

Final step - derives reading statistics from the email body.
"""

import logfire

from pipeline.core.runner import BasePipelineStep
from pipeline.models.core import PipelineData, StepResult

from .utils import calculate_metadata


class MetadataCalculatorStep(BasePipelineStep):
    """
    Step 5: Word count and reading time.

    Updates PipelineData fields:
    - email_metadata: EmailMetadata
    """

    def __init__(self):
        """Initialize metadata calculator step."""
        super().__init__(step_name="metadata_calculator")

    async def _execute_step(self, pipeline_data: PipelineData) -> StepResult:
        email_metadata = calculate_metadata(pipeline_data.body)
        pipeline_data.email_metadata = email_metadata

        logfire.info(
            "Email metadata calculated",
            word_count=email_metadata.word_count,
            estimated_read_time=email_metadata.estimated_read_time
        )

        return StepResult(
            success=True,
            step_name=self.step_name,
            metadata={
                "word_count": email_metadata.word_count,
                "estimated_read_time": email_metadata.estimated_read_time
            }
        )
