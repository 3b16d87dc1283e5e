"""Pure trust algebra: lattice contracts, trust values and verdicts."""
