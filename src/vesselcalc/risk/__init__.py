"""
Risk Assessment Module

두 선박의 충돌 위험 평가:
- CPA/TCPA 계산
"""

from .cpa_tcpa import (
    solve_tcpa,
    calculate_cpa_and_tcpa,
    calculate_cpa_between,
)

__all__ = [
    'solve_tcpa',
    'calculate_cpa_and_tcpa',
    'calculate_cpa_between',
]
