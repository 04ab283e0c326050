"""
Prompt Builder Step - Step 1

Pure transformation of the request into the prompt pair sent to the model.
"""

import logfire
from typing import Optional

from pipeline.core.runner import BasePipelineStep
from pipeline.models.core import PipelineData, StepResult

from .prompts import build_prompts


class PromptBuilderStep(BasePipelineStep):
    """
    Step 1: Build system and user prompts.

    Updates PipelineData fields:
    - system_prompt: str
    - user_prompt: str
    """

    def __init__(self):
        """Initialize prompt builder step."""
        super().__init__(step_name="prompt_builder")

    async def _validate_input(self, pipeline_data: PipelineData) -> Optional[str]:
        if not (pipeline_data.request.context or "").strip():
            return "context is empty or missing"
        return None

    async def _execute_step(self, pipeline_data: PipelineData) -> StepResult:
        system_prompt, user_prompt = build_prompts(pipeline_data.request)

        pipeline_data.system_prompt = system_prompt
        pipeline_data.user_prompt = user_prompt

        logfire.info(
            "Prompts built",
            system_prompt_length=len(system_prompt),
            user_prompt_length=len(user_prompt),
            has_recipient=bool(pipeline_data.request.recipient)
        )

        return StepResult(
            success=True,
            step_name=self.step_name,
            metadata={
                "system_prompt_length": len(system_prompt),
                "user_prompt_length": len(user_prompt)
            }
        )
