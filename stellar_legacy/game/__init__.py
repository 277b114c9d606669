"""Game state, ledger, notifications and the loop that drives them."""
