"""
Account lifecycle use cases.

Each service module orchestrates the repositories to implement one part of
the lifecycle (register, activate, update profile, rotate password, sweep
stale registrations, administer). Callers such as an HTTP layer should call
these services instead of touching the repositories directly.
"""

from .activation_service import ActivationService
from .admin_service import AccountAdministration
from .credential_service import CredentialRotationService
from .expiry_sweeper import ExpirySweeper, SweepReport
from .profile_service import ProfileService
from .registration_service import RegistrationService
from .scheduler_service import SweepScheduler

__all__ = [
    "AccountAdministration",
    "ActivationService",
    "CredentialRotationService",
    "ExpirySweeper",
    "ProfileService",
    "RegistrationService",
    "SweepReport",
    "SweepScheduler",
]
