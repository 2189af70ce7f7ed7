"""Pipeline stages: classify, aggregate, size and report."""
