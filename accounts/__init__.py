"""Account lifecycle core: registration, activation, profile and credential updates, expiry sweeping."""
