class IndexBuildError(ValueError):
    """Raised when an index builder is asked to build with a prerequisite missing.

    Each subclass names exactly one missing prerequisite. ``kind`` carries the
    label of the index being built (eg, ``CompositeIndex`` or ``GSI``).
    """

    requirement = "configuration"

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Missing {kind} index {self.requirement}")


class MissingIndexName(IndexBuildError):
    requirement = "name"


class MissingPartitionKeySpec(IndexBuildError):
    requirement = "PK options"


class MissingSortKeySpec(IndexBuildError):
    requirement = "SK options"


class MissingEncodingMethod(IndexBuildError):
    requirement = "encoding method"
