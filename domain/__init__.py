"""Domain layer for BMI calculation.

Pure business logic, decoupled from the GraphQL presentation and the
infrastructure.
"""
