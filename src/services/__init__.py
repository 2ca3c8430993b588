"""Business logic services used by handlers.

Services are imported lazily by handlers so collaborator wiring happens once
per warm process rather than at import time.
"""

# Do NOT import services here - use lazy loading in handlers instead
