from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InvalidConfigurationException,
    InvalidStateTransitionException,
    OptimisticLockException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "InvalidConfigurationException",
    "BusinessRuleViolationException",
    "InvalidStateTransitionException",
    "DuplicateResourceException",
    "OptimisticLockException",
]
