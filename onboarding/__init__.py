"""
Finance Onboarding - Source Package

The onboarding wizard core of a personal finance assistant: a sequential,
validated, localized multi-page flow that collects language, display name,
currency and survey answers, then emits one immutable survey result.

DESIGN PRINCIPLES:
1. The user can only move forward when the current page is valid
2. Programming errors fail early and visibly
3. Missing translations and bad stored preferences degrade gracefully
4. Every user action is auditable
5. Preference storage is injected and swappable
"""

__version__ = "1.0.0"
__author__ = "Finance Onboarding Team"
