"""Record store collaborators feeding snapshots to the engine."""
