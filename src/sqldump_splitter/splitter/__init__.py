"""Statement-aware splitting of dump files into numbered chunks."""
