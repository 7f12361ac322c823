"""
Data access layer.

Design rules:
- Views call ONLY functions in this package.
- Store failures are converted to FetchError / DeleteError at the service
  boundary; nothing from the store layer reaches rendering code.
- No env var reads here (config-only).
"""
