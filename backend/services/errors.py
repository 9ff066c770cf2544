"""Failure taxonomy of the extraction pipeline.

These are raised inside the pipeline and converted into typed results at the
extractor/updater boundary; they never reach HTTP handlers.
"""


class ResumePipelineError(Exception):
    kind: str = "pipeline_error"


class EmptyTranscriptError(ResumePipelineError):
    kind = "empty_transcript"

    def __init__(self, message: str = "No conversation content found to extract resume data from"):
        super().__init__(message)


class NoStructuredOutputError(ResumePipelineError):
    kind = "no_structured_output"

    def __init__(self, raw_text: str, message: str = "No JSON object found in response"):
        super().__init__(message)
        self.raw_text = raw_text


class MalformedOutputError(ResumePipelineError):
    kind = "malformed_output"

    def __init__(self, raw_text: str, message: str = "Failed to parse extracted resume data"):
        super().__init__(message)
        self.raw_text = raw_text


class ValidationFailedError(ResumePipelineError):
    kind = "validation_failed"

    def __init__(self, errors: list[str]):
        super().__init__(f"Invalid resume data structure: {', '.join(errors)}")
        self.errors = errors


class CompletionServiceError(ResumePipelineError):
    kind = "service_error"
