"""State, ports and default capabilities shared by the task operations."""
