"""BMI use cases."""
