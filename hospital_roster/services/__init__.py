"""Service functions: one module per roster concern, each taking an open Session."""
