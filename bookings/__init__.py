"""Court booking workflows: submission, payment hand-off and status lookup."""
