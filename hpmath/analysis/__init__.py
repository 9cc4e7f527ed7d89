"""Diagnostics for the iterative algorithms."""

from hpmath.analysis.iteration_profile import IterationProfile, profile_iterations

__all__ = ['IterationProfile', 'profile_iterations']
