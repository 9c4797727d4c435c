"""Schemas: Pydantic request/response models, the validation boundary.

Invariants:
    - Every range the pricing core assumes (cost >= 0, markup 0-1000,
      discount/tax 0-100) is enforced here before core is called

Design Decisions:
    - One module per onboarding section plus onboarding/admin flows
"""
