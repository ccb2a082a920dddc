"""Billing services."""

from packages.billing.services.billing_engine import BillingEngine

__all__ = ["BillingEngine"]
