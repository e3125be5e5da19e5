"""
Service Layer - Orchestration and Errors
"""
