"""Validation package."""

from onboarding.validation.gate import ValidationGate

__all__ = ["ValidationGate"]
