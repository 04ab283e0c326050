"""
Pipeline factory function.

This module provides create_email_pipeline() which instantiates
all pipeline steps in the correct order.
"""

from pipeline.core.runner import PipelineRunner


def create_email_pipeline(client) -> PipelineRunner:
    """
    Factory function to create a fully configured email generation pipeline.

    Steps are registered in execution order:
    1. PromptBuilder: Build system and user prompts from the request
    2. EmailGenerator: Call the generation endpoint for raw text
    3. PostProcessor: Normalize raw text into canonical email text
    4. EmailSplitter: Derive subject and body
    5. MetadataCalculator: Word count and reading time

    Args:
        client: services.generation_client.GenerationClient used by step 2

    Returns:
        PipelineRunner with all steps registered and ready to execute

    Example:
        ```python
        from pipeline import create_email_pipeline
        from pipeline.models.core import EmailRequest, PipelineData, Purpose

        runner = create_email_pipeline(client)
        pipeline_data = PipelineData(
            task_id="abc-123",
            request=EmailRequest(
                context="Need to reschedule our meeting tomorrow",
                purpose=Purpose.FOLLOW_UP,
            ),
        )
        result = await runner.run(pipeline_data)
        print(result.subject)
        ```
    """
    runner = PipelineRunner()

    # Import step classes lazily to avoid circular dependencies at package import time
    from pipeline.steps.prompt_builder.main import PromptBuilderStep
    from pipeline.steps.email_generator.main import EmailGeneratorStep
    from pipeline.steps.post_processor.main import PostProcessorStep
    from pipeline.steps.email_splitter.main import EmailSplitterStep
    from pipeline.steps.metadata_calculator.main import MetadataCalculatorStep

    runner.register_step(PromptBuilderStep())
    runner.register_step(EmailGeneratorStep(client))
    runner.register_step(PostProcessorStep())
    runner.register_step(EmailSplitterStep())
    runner.register_step(MetadataCalculatorStep())

    return runner
