"""testgate: one-shot pass/fail wrapper around a workspace test run."""
