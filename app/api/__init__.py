"""HTTP surface: routes, per-version registrations and handlers."""
