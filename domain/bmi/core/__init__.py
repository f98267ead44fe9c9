"""Core BMI domain model."""
