"""Pipeline steps package.

This package contains all the individual steps in the email generation pipeline:
- prompt_builder: Builds system and user prompts from the request
- email_generator: Calls the text-generation endpoint
- post_processor: Normalizes raw output into canonical email text
- email_splitter: Derives subject and body
- metadata_calculator: Word count and reading time
"""
