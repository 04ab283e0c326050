"""
Core pipeline infrastructure - base classes for all steps.

BasePipelineStep: Abstract base class for pipeline steps
PipelineRunner: Orchestrates sequential step execution
"""

from abc import ABC, abstractmethod
from typing import Optional, Callable, Awaitable, List
import time
import logfire

from pipeline.models.core import EmailResult, PipelineData, StepResult
from pipeline.core.exceptions import PipelineExecutionError, StepExecutionError, ValidationError


ProgressCallback = Callable[[str, str], Awaitable[None]]


class BasePipelineStep(ABC):
    """
    Abstract base class for all pipeline steps.

    Each step must implement:
    - _execute_step(): Core business logic
    - Optionally: _validate_input(): Input validation

    The execute() method wraps step execution with:
    - Logfire observability spans
    - Error handling and logging
    - Timing metrics
    """

    def __init__(self, step_name: str):
        """
        Initialize pipeline step.

        Args:
            step_name: Unique identifier for this step (used in logs)
        """
        self.step_name = step_name

    async def execute(
        self,
        pipeline_data: PipelineData,
        progress_callback: Optional[ProgressCallback] = None
    ) -> StepResult:
        """
        Execute the pipeline step with full observability.

        Args:
            pipeline_data: Shared data object (modified in-place)
            progress_callback: Optional async callback for progress updates
                             Signature: callback(step_name, status)

        Returns:
            StepResult indicating success/failure

        Raises:
            StepExecutionError: If step fails and cannot continue
        """
        start_time = time.perf_counter()

        with logfire.span(
            f"pipeline.{self.step_name}",
            task_id=pipeline_data.task_id,
            step=self.step_name
        ):
            try:
                logfire.info(
                    f"{self.step_name} started",
                    task_id=pipeline_data.task_id
                )

                if progress_callback:
                    await progress_callback(self.step_name, "started")

                validation_error = await self._validate_input(pipeline_data)
                if validation_error:
                    raise ValidationError(f"Input validation failed: {validation_error}")

                result = await self._execute_step(pipeline_data)

                duration = time.perf_counter() - start_time
                pipeline_data.add_timing(self.step_name, duration)

                if result.metadata is None:
                    result.metadata = {}
                result.metadata["duration"] = duration

                logfire.info(
                    f"{self.step_name} completed",
                    task_id=pipeline_data.task_id,
                    duration=duration,
                    success=result.success
                )

                if progress_callback:
                    status = "completed" if result.success else "failed"
                    await progress_callback(self.step_name, status)

                return result

            except Exception as e:
                duration = time.perf_counter() - start_time

                logfire.error(
                    f"{self.step_name} failed",
                    task_id=pipeline_data.task_id,
                    error=str(e),
                    error_type=type(e).__name__,
                    duration=duration,
                    exc_info=True
                )

                pipeline_data.add_error(self.step_name, str(e))

                if progress_callback:
                    await progress_callback(self.step_name, "failed")

                raise StepExecutionError(self.step_name, e) from e

    async def _validate_input(self, pipeline_data: PipelineData) -> Optional[str]:
        """
        Validate that prerequisites for this step are met.

        Args:
            pipeline_data: Shared data object

        Returns:
            Error message if validation fails, None if valid
        """
        return None

    @abstractmethod
    async def _execute_step(self, pipeline_data: PipelineData) -> StepResult:
        """
        Execute step-specific business logic.

        MUST BE IMPLEMENTED by each step.

        Args:
            pipeline_data: Shared data object (modify in-place)

        Returns:
            StepResult with success=True/False
        """
        pass


class PipelineRunner:
    """
    Orchestrates sequential execution of all pipeline steps.

    Responsibilities:
    - Register steps in execution order
    - Execute steps sequentially
    - Handle step failures
    - Return the final EmailResult
    """

    def __init__(self, steps: Optional[List[BasePipelineStep]] = None):
        """
        Initialize pipeline runner.

        Args:
            steps: Optional list of steps (if None, start empty)
        """
        self.steps = steps or []

    def register_step(self, step: BasePipelineStep) -> None:
        """
        Add a step to the pipeline.

        Steps execute in the order they are registered.
        """
        self.steps.append(step)

    async def run(
        self,
        pipeline_data: PipelineData,
        progress_callback: Optional[ProgressCallback] = None
    ) -> EmailResult:
        """
        Run all pipeline steps sequentially.

        Args:
            pipeline_data: Shared data object
            progress_callback: Optional callback for progress updates

        Returns:
            EmailResult assembled from the step outputs

        Raises:
            StepExecutionError: If any step fails
            PipelineExecutionError: If no canonical email was produced
        """
        request = pipeline_data.request
        with logfire.span(
            "pipeline.full_run",
            task_id=pipeline_data.task_id,
            purpose=request.purpose.value,
            tone=request.tone.value,
            language=request.language
        ):
            logfire.info(
                "Pipeline execution started",
                task_id=pipeline_data.task_id,
                total_steps=len(self.steps)
            )

            for i, step in enumerate(self.steps):
                progress_pct = int(((i + 1) / len(self.steps)) * 100)
                logfire.info(
                    f"Executing step {i+1}/{len(self.steps)}",
                    step=step.step_name,
                    progress_pct=progress_pct
                )

                result = await step.execute(pipeline_data, progress_callback)

                if not result.success:
                    raise StepExecutionError(
                        step.step_name,
                        Exception(result.error or "Unknown error")
                    )

            if not pipeline_data.full_email:
                raise PipelineExecutionError(
                    "Pipeline completed but full_email not set. "
                    "PostProcessor step must set pipeline_data.full_email"
                )

            total_duration = pipeline_data.total_duration()
            logfire.info(
                "Pipeline execution completed",
                task_id=pipeline_data.task_id,
                total_duration=total_duration,
                step_timings=pipeline_data.step_timings
            )

            return pipeline_data.to_result()
