"""Court calendar, deadline engine and case validation."""
