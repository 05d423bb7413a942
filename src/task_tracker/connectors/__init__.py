"""Ways to drive the task operations from outside (console)."""
