class PedigreeError(Exception):
    """Base exception for pedigree construction failures."""


class MissingProbandError(PedigreeError):
    """Raised when a family is built without any Proband record."""


class RecordLoadError(PedigreeError):
    """Raised when a fact-record export cannot be read."""


class PipelineError(PedigreeError):
    """Raised when the build pipeline fails."""
