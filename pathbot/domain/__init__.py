"""Domain model and the per-step planner."""
