"""Run-level services: orchestration, progress, summary, export."""
