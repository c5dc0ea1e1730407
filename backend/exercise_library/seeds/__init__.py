"""Development seed data for the exercise catalog."""
