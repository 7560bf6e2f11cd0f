"""
Core numeric building blocks.

- math: precision contexts, preconditions, power_by_squaring
- field: QuotientField descriptors
- number: immutable complex numbers and fractions
"""
