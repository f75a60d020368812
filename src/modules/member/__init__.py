"""
Member Module
=============

Domain: who is enrolled in the steps challenge.

- MemberRegistry: enrolment, lookup and registration-order iteration
"""

from .registry import MemberRegistry

__all__ = [
    "MemberRegistry",
]
