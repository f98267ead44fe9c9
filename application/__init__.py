"""Application layer: use cases built on top of the BMI domain."""
