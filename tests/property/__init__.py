"""
Module Automation - Property-Based Testing Suite

Property-based testing using Hypothesis to check the registration and
activation invariants over arbitrary router and projection lists.
"""
