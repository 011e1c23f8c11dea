"""qalink API domains: ``uid`` (identifier codec) and ``link`` (reference scanner)."""
