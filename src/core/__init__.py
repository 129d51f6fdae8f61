"""
Core domain models, integral math primitives, and display helpers.

This module contains the building blocks of the even-squares pipeline that are
independent of program entry and console wiring.
"""
