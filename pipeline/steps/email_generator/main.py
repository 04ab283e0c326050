"""
Email Generator Step - Step 2

The only step that leaves the process: one call to the generation endpoint.
No retries here; a failure ends the pipeline with GenerationFailure.
"""

import logfire
from typing import Optional

from pipeline.core.runner import BasePipelineStep
from pipeline.models.core import PipelineData, StepResult
from services.generation_client import GenerationClient


class EmailGeneratorStep(BasePipelineStep):
    """
    Step 2: Generate raw email text.

    Updates PipelineData fields:
    - raw_email: str
    - metadata["model"]: str
    """

    def __init__(self, client: GenerationClient):
        """
        Initialize email generator step.

        Args:
            client: Configured generation client
        """
        super().__init__(step_name="email_generator")
        self.client = client

    async def _validate_input(self, pipeline_data: PipelineData) -> Optional[str]:
        if not pipeline_data.system_prompt:
            return "system_prompt is missing (prompt_builder must run first)"

        if not pipeline_data.user_prompt:
            return "user_prompt is missing (prompt_builder must run first)"

        return None

    async def _execute_step(self, pipeline_data: PipelineData) -> StepResult:
        logfire.info(
            "Generating email",
            model=self.client.model_name,
            temperature=self.client.temperature,
            purpose=pipeline_data.request.purpose.value
        )

        # GenerationFailure propagates; BasePipelineStep wraps and logs it
        raw_email = await self.client.generate(
            pipeline_data.system_prompt,
            pipeline_data.user_prompt
        )

        pipeline_data.raw_email = raw_email
        pipeline_data.metadata["model"] = self.client.model_name

        return StepResult(
            success=True,
            step_name=self.step_name,
            metadata={
                "model": self.client.model_name,
                "raw_length": len(raw_email)
            }
        )
