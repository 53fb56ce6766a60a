"""Exceptions raised by the article session."""

from referent.enums import ArtifactAction


class ArtifactPreconditionError(Exception):
    """Raised when an artifact is requested before a successful translation."""

    def __init__(self, action: ArtifactAction) -> None:
        """Initialise ArtifactPreconditionError.

        :param action: The requested action.
        """
        self.action = action
        super().__init__(
            f"Cannot run '{action}' before an article has been fetched and translated"
        )
