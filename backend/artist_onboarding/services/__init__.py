"""Services Layer — persistence and orchestration per onboarding concern.

Invariants:
    - Each service takes an AsyncSession and owns its commits
    - Business rules come from core/; services never reimplement pricing or SKU logic

Design Decisions:
    - One service per onboarding section plus onboarding flow and admin
"""
