"""HTTP API for Referent."""

from referent.api.client import FailureKind, ReferentAPIClient, ReferentAPIClientError

__all__ = ["FailureKind", "ReferentAPIClient", "ReferentAPIClientError"]
