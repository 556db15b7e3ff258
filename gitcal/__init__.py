"""gitcal: a terminal contribution calendar for one git author."""
