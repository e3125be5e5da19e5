"""
Execution Schemas - Stepper state definitions.
"""
