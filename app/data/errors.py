from __future__ import annotations


class AdminError(RuntimeError):
    """Base class for every error the admin surfaces to the operator."""


class GateRejected(AdminError):
    """Wrong access code. The operator may simply try again."""


class FetchError(AdminError):
    """Reading recent patterns failed. Previously shown records are kept."""


class DeleteError(AdminError):
    """Deleting a voicing failed. The record stays listed."""


class StoreError(RuntimeError):
    """Transport or PostgREST failure talking to the remote store."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class StoreAuthError(StoreError):
    pass
