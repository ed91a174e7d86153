"""worklog - personal command-line day log."""
