"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IContentStore,
    ISignupRepository,
    IUserRepository,
)
from app.application.interfaces.services import IMailTransport

__all__ = [
    "IContentStore",
    "IMailTransport",
    "ISignupRepository",
    "IUserRepository",
]
