"""Services Layer — request-scoped orchestration between providers and core."""
